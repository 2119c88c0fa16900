"""Init command."""

import logging

from psprofiledirs.commands.common import make_confirm, resolve_dimensions, resolve_kinds
from psprofiledirs.constants import ExitCode
from psprofiledirs.core.errors import FilesystemError
from psprofiledirs.profile.builder import build_profile_directories
from psprofiledirs.runtime.console import ConsoleSink
from psprofiledirs.state.settings import load_settings

LOGGER = logging.getLogger(__name__)


def run(args):
    settings = load_settings(args)
    sink = ConsoleSink(color=settings.color)
    dry_run = getattr(args, "dry_run", False)

    print(f"profile root: {settings.root}")
    try:
        result = build_profile_directories(
            settings,
            resolve_kinds(args),
            resolve_dimensions(args),
            dry_run=dry_run,
            confirm=make_confirm(getattr(args, "confirm", False)),
            sink=sink,
        )
    except FilesystemError as exc:
        LOGGER.debug("init aborted | context=%s", exc.context)
        print(f"error: {exc}")
        return ExitCode.RUNTIME_ERROR

    verb = "would create" if dry_run else "created"
    print(f"init ok: {verb} {result.count} directories, {len(result.existing)} already present")
    if result.skipped:
        print(f"note: {len(result.skipped)} directories skipped")
    return ExitCode.OK
