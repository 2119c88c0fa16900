"""Shared CLI constants."""

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    USAGE = 2
    RUNTIME_ERROR = 10


APP_NAME = "psprofiledirs"

ENV_ROOT = "PSPROFILEDIRS_ROOT"
ENV_HOST = "PSPROFILEDIRS_HOST"
ENV_TERMINAL = "PSPROFILEDIRS_TERMINAL"

DEFAULT_HOST_NAME = "Microsoft.PowerShell"

# TERM_PROGRAM value -> terminal host name.
TERMINAL_PROGRAMS = {
    "vscode": "Microsoft.VSCode",
}
