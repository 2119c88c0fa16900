"""Plan command: show the directory tree without touching the filesystem."""

from psprofiledirs.commands.common import resolve_dimensions, resolve_kinds
from psprofiledirs.constants import ExitCode
from psprofiledirs.core.models import PROFILE_KIND_ORDER
from psprofiledirs.core.planner import plan_directories
from psprofiledirs.core.tree import render_plan
from psprofiledirs.state.settings import load_settings


def run(args):
    settings = load_settings(args)
    kinds = resolve_kinds(args)
    dims = resolve_dimensions(args)

    print(f"profile root: {settings.root}")
    for kind in PROFILE_KIND_ORDER:
        name = settings.profile_names.get(kind)
        if kind not in kinds or not name:
            continue
        for line in render_plan(name, plan_directories(dims, settings.facts), settings.glyphs):
            print(line.text)
    return ExitCode.OK
