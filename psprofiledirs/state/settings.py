"""Per-invocation settings, resolved once and passed by value."""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from psprofiledirs.core.models import EnvironmentFacts
from psprofiledirs.core.tree import ASCII_GLYPHS, UNICODE_GLYPHS, GlyphSet
from psprofiledirs.runtime.detect import detect_environment
from psprofiledirs.state.paths import (
    profile_name_table,
    resolve_host_name,
    resolve_profile_root,
    resolve_terminal_name,
)


@dataclass(frozen=True)
class Settings:
    root: Path
    profile_names: dict
    facts: EnvironmentFacts
    glyphs: GlyphSet = UNICODE_GLYPHS
    color: bool = False


def color_enabled(no_color=False, stream=None, environ=None):
    environ = os.environ if environ is None else environ
    stream = sys.stdout if stream is None else stream
    if no_color or environ.get("NO_COLOR"):
        return False
    return bool(getattr(stream, "isatty", lambda: False)())


def load_settings(args, environ=None):
    environ = os.environ if environ is None else environ
    host = resolve_host_name(getattr(args, "host_name", None), environ)
    terminal = resolve_terminal_name(getattr(args, "terminal_name", None), environ)
    return Settings(
        root=resolve_profile_root(getattr(args, "root", None), environ),
        profile_names=profile_name_table(host, terminal),
        facts=detect_environment(),
        glyphs=ASCII_GLYPHS if getattr(args, "ascii", False) else UNICODE_GLYPHS,
        color=color_enabled(getattr(args, "no_color", False), environ=environ),
    )
