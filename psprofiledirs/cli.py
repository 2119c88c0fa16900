"""CLI entry and command wiring."""

import argparse
import sys

from psprofiledirs.commands import init_cmd, plan_cmd, reclaim_cmd, status_cmd
from psprofiledirs.constants import APP_NAME, ExitCode
from psprofiledirs.core.models import Edition
from psprofiledirs.logger import configure_logging


COMMANDS = {
    "init": init_cmd.run,
    "plan": plan_cmd.run,
    "reclaim": reclaim_cmd.run,
    "status": status_cmd.run,
}


def _add_layout_args(p):
    p.add_argument("--user", action="store_true", help="Include the all-hosts user profile")
    p.add_argument("--host", action="store_true", help="Include the current-host profile")
    p.add_argument("--terminal", action="store_true", help="Include the terminal profile, if any")
    p.add_argument("--arch", action="store_true", help="Add an _Arch-* directory")
    p.add_argument("--machine", action="store_true", help="Add a _Machine-* directory")
    p.add_argument("--platform", action="store_true", help="Add a _Platform-* directory")
    p.add_argument(
        "--edition",
        choices=[e.value for e in Edition],
        default=Edition.NONE.value,
        help="Add _PSEdition-* directories",
    )


def build_parser():
    parser = argparse.ArgumentParser(prog=APP_NAME)
    parser.add_argument("--root", help="Profile root directory")
    parser.add_argument("--host-name", help="Host name used for the host profile")
    parser.add_argument("--terminal-name", help="Terminal name used for the terminal profile")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--ascii", action="store_true", help="Draw the tree with ASCII only")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command")

    p_init = sub.add_parser("init", help="Create profile directories")
    _add_layout_args(p_init)
    p_init.add_argument("--dry-run", action="store_true")
    p_init.add_argument("--confirm", action="store_true", help="Ask before each directory")

    p_plan = sub.add_parser("plan", help="Show the directory tree without creating it")
    _add_layout_args(p_plan)

    p_reclaim = sub.add_parser("reclaim", help="Remove empty directories under the root")
    p_reclaim.add_argument("--dry-run", action="store_true")
    p_reclaim.add_argument("--yes", action="store_true")

    p_status = sub.add_parser("status", help="Show root, environment and profiles")
    p_status.add_argument("--json", action="store_true")

    return parser


def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    if not args.command:
        parser.print_help()
        return ExitCode.USAGE

    return COMMANDS[args.command](args)
