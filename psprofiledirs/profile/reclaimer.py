"""Bottom-up removal of empty directories."""

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path

from psprofiledirs.profile.confirm import approve_all
from psprofiledirs.core.errors import FilesystemError
from psprofiledirs.runtime.console import ListSink

LOGGER = logging.getLogger(__name__)


@dataclass
class ReclaimResult:
    dry_run: bool = False
    removed: list = field(default_factory=list)
    skipped: list = field(default_factory=list)

    @property
    def count(self):
        return len(self.removed)


def collect_directories(root):
    """All real directories below `root`, deepest first; symlinks are not followed."""

    def fail(exc):
        raise FilesystemError("scan", exc.filename or root, exc.strerror or str(exc)) from exc

    found = []
    for dirpath, dirnames, _ in os.walk(root, onerror=fail, followlinks=False):
        for name in dirnames:
            path = Path(dirpath) / name
            if not path.is_symlink():
                found.append(path)
    found.sort(key=lambda p: (-len(p.relative_to(root).parts), str(p)))
    return found


def is_real_directory(path):
    try:
        return not path.is_symlink() and path.is_dir()
    except OSError as exc:
        raise FilesystemError("scan", path, exc.strerror or str(exc)) from exc


def is_empty_directory(path, removed=()):
    """True when `path` holds nothing but directories already in `removed`."""
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if Path(entry.path) not in removed:
                    return False
    except OSError as exc:
        raise FilesystemError("scan", path, exc.strerror or str(exc)) from exc
    return True


def reclaim_empty_directories(root, *, dry_run=False, confirm=approve_all, sink=None):
    root = Path(root)
    sink = ListSink() if sink is None else sink
    result = ReclaimResult(dry_run=dry_run)
    if not root.is_dir():
        LOGGER.debug("nothing to reclaim, %s is not a directory", root)
        return result

    removed = set()
    for path in collect_directories(root):
        if not is_real_directory(path):
            continue
        if not is_empty_directory(path, removed):
            continue
        if dry_run:
            sink.note(f'What if: Remove empty directory "{path}"')
        elif not confirm("Remove empty directory", path):
            LOGGER.debug("denied: %s", path)
            result.skipped.append(path)
            continue
        else:
            try:
                path.rmdir()
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise FilesystemError("remove", path, exc.strerror or str(exc)) from exc
            sink.note(f"removed {path}")
            LOGGER.debug("removed: %s", path)
        removed.add(path)
        result.removed.append(path)
    return result
