"""Profile directory creation with tree progress output."""

from dataclasses import dataclass, field
import logging

from psprofiledirs.profile.confirm import approve_all
from psprofiledirs.core.errors import FilesystemError
from psprofiledirs.core.models import PROFILE_KIND_ORDER
from psprofiledirs.core.planner import plan_directories
from psprofiledirs.core.tree import render_entry, render_root, with_neighbors
from psprofiledirs.runtime.console import ListSink

LOGGER = logging.getLogger(__name__)

EXISTING = "existing"
CREATED = "created"
DENIED = "denied"


@dataclass
class BuildResult:
    dry_run: bool = False
    created: list = field(default_factory=list)
    existing: list = field(default_factory=list)
    skipped: list = field(default_factory=list)

    @property
    def count(self):
        return len(self.created)


def ensure_directory(path, *, dry_run, confirm, sink, parents=False):
    """Create one directory unless it exists; return EXISTING, CREATED or DENIED."""
    if path.is_dir():
        LOGGER.debug("exists: %s", path)
        return EXISTING
    if path.exists() or path.is_symlink():
        raise FilesystemError("create", path, "path exists and is not a directory")
    if dry_run:
        sink.note(f'What if: Create directory "{path}"')
        return CREATED
    if not confirm("Create directory", path):
        LOGGER.debug("denied: %s", path)
        return DENIED
    try:
        path.mkdir(parents=parents, exist_ok=True)
    except OSError as exc:
        raise FilesystemError("create", path, exc.strerror or str(exc)) from exc
    LOGGER.debug("created: %s", path)
    return CREATED


def _record(result, path, status):
    if status == CREATED:
        result.created.append(path)
    elif status == EXISTING:
        result.existing.append(path)
    else:
        result.skipped.append(path)


def build_profile(root_dir, name, plan, result, *, dry_run, confirm, sink, glyphs):
    # The configured root itself may not exist yet on a fresh machine.
    status = ensure_directory(root_dir, dry_run=dry_run, confirm=confirm, sink=sink, parents=True)
    _record(result, root_dir, status)
    sink.line(render_root(name, glyphs).text, status == EXISTING)

    denied = [()] if status == DENIED else []
    for prequel, entry, sequel, last in with_neighbors(plan):
        path = root_dir.joinpath(*entry)
        if any(entry[: len(d)] == d for d in denied):
            LOGGER.debug("skipped under denied parent: %s", path)
            status = DENIED
        else:
            status = ensure_directory(path, dry_run=dry_run, confirm=confirm, sink=sink)
            if status == DENIED:
                denied.append(entry)
        _record(result, path, status)
        for line in render_entry(entry, prequel, sequel, last, glyphs):
            sink.line(line.text, status == EXISTING)


def build_profile_directories(settings, kinds, dims, *, dry_run=False, confirm=approve_all, sink=None):
    """Create every requested profile root and its conditional sub-directories.

    Kinds are processed in table order; a kind without a profile name (the
    terminal profile on most hosts) is skipped. Any filesystem failure other
    than "already exists" aborts the pass with FilesystemError.
    """
    sink = ListSink() if sink is None else sink
    result = BuildResult(dry_run=dry_run)
    for kind in PROFILE_KIND_ORDER:
        if kind not in kinds:
            continue
        name = settings.profile_names.get(kind)
        if not name:
            LOGGER.debug("no %s profile for this host, skipping", kind.value)
            continue
        plan = plan_directories(dims, settings.facts)
        build_profile(
            settings.root / name,
            name,
            plan,
            result,
            dry_run=dry_run,
            confirm=confirm,
            sink=sink,
            glyphs=settings.glyphs,
        )
    return result
