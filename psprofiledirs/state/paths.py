"""Managed path layout."""

import os
import platform
from pathlib import Path

from psprofiledirs.constants import (
    DEFAULT_HOST_NAME,
    ENV_HOST,
    ENV_ROOT,
    ENV_TERMINAL,
    TERMINAL_PROGRAMS,
)
from psprofiledirs.core.models import PROFILE_KIND_ORDER, ProfileKind


def default_profile_root(environ=None):
    environ = os.environ if environ is None else environ
    if platform.system() == "Windows":
        return Path.home() / "Documents" / "PowerShell"
    xdg = environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "powershell"


def resolve_profile_root(override=None, environ=None):
    environ = os.environ if environ is None else environ
    value = override or environ.get(ENV_ROOT)
    if value:
        return Path(value).expanduser()
    return default_profile_root(environ)


def resolve_host_name(override=None, environ=None):
    environ = os.environ if environ is None else environ
    return override or environ.get(ENV_HOST) or DEFAULT_HOST_NAME


def resolve_terminal_name(override=None, environ=None):
    environ = os.environ if environ is None else environ
    value = override or environ.get(ENV_TERMINAL)
    if value:
        return value
    return TERMINAL_PROGRAMS.get(environ.get("TERM_PROGRAM", "").lower())


def profile_name_table(host_name, terminal_name=None):
    """Ordered profile directory names; the terminal entry may be None."""
    return {
        ProfileKind.USER: "profile",
        ProfileKind.HOST: f"{host_name}_profile",
        ProfileKind.TERMINAL: f"{terminal_name}_profile" if terminal_name else None,
    }


def profile_dir(root, name):
    return Path(root) / name


def iter_profile_dirs(root, names):
    for kind in PROFILE_KIND_ORDER:
        name = names.get(kind)
        if name:
            yield kind, profile_dir(root, name)
