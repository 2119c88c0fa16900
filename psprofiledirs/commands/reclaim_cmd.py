"""Reclaim command."""

import logging

from psprofiledirs.commands.common import make_confirm
from psprofiledirs.constants import ExitCode
from psprofiledirs.core.errors import FilesystemError
from psprofiledirs.profile.reclaimer import reclaim_empty_directories
from psprofiledirs.runtime.console import ConsoleSink
from psprofiledirs.state.settings import load_settings

LOGGER = logging.getLogger(__name__)


def run(args):
    settings = load_settings(args)
    dry_run = getattr(args, "dry_run", False)
    try:
        result = reclaim_empty_directories(
            settings.root,
            dry_run=dry_run,
            confirm=make_confirm(not getattr(args, "yes", False)),
            sink=ConsoleSink(color=settings.color),
        )
    except FilesystemError as exc:
        LOGGER.debug("reclaim aborted | context=%s", exc.context)
        print(f"error: {exc}")
        return ExitCode.RUNTIME_ERROR

    verb = "would remove" if dry_run else "removed"
    print(f"reclaim ok: {verb} {result.count} empty directories")
    if result.skipped:
        print(f"note: {len(result.skipped)} directories kept")
    return ExitCode.OK
