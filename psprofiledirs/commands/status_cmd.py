"""Status command."""

import json

from psprofiledirs.constants import ExitCode
from psprofiledirs.state.paths import iter_profile_dirs
from psprofiledirs.state.settings import load_settings


def run(args):
    settings = load_settings(args)
    payload = {
        "root": str(settings.root),
        "root_exists": settings.root.is_dir(),
        "architecture": settings.facts.architecture,
        "machine": settings.facts.machine,
        "platform": settings.facts.platform,
        "profiles": {
            kind.value: {"path": str(path), "exists": path.is_dir()}
            for kind, path in iter_profile_dirs(settings.root, settings.profile_names)
        },
    }

    if getattr(args, "json", False):
        print(json.dumps(payload, indent=2))
    else:
        print("psprofiledirs status")
        for k, v in payload.items():
            if k == "profiles":
                continue
            print(f"- {k}: {v}")
        for kind, info in payload["profiles"].items():
            print(f"- {kind}_profile: {info['path']} ({'exists' if info['exists'] else 'missing'})")
    return ExitCode.OK
