"""Environment descriptors used to name conditional directories."""

import platform
import socket

from psprofiledirs.core.models import EnvironmentFacts


ARCHITECTURE_NAMES = {
    "x86_64": "X64",
    "amd64": "X64",
    "x64": "X64",
    "i386": "X86",
    "i686": "X86",
    "x86": "X86",
    "aarch64": "Arm64",
    "arm64": "Arm64",
    "armv7l": "Arm",
    "armv6l": "Arm",
    "arm": "Arm",
}

PLATFORM_NAMES = {
    "windows": "Windows",
    "linux": "Linux",
    "darwin": "MacOS",
    "freebsd": "FreeBSD",
}


def detect_architecture():
    machine = platform.machine()
    return ARCHITECTURE_NAMES.get(machine.lower(), machine or "Unknown")


def detect_machine_name():
    name = platform.node() or socket.gethostname()
    # Only the short host name; domains would add dots to the directory name.
    return name.split(".", 1)[0] or "localhost"


def detect_platform():
    system = platform.system()
    return PLATFORM_NAMES.get(system.lower(), system or "Unknown")


def detect_environment():
    return EnvironmentFacts(
        architecture=detect_architecture(),
        machine=detect_machine_name(),
        platform=detect_platform(),
    )
