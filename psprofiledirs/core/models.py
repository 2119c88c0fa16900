"""Shared data models."""

from dataclasses import dataclass
from enum import Enum


class ProfileKind(Enum):
    USER = "user"
    HOST = "host"
    TERMINAL = "terminal"


PROFILE_KIND_ORDER = (ProfileKind.USER, ProfileKind.HOST, ProfileKind.TERMINAL)


class Dimension(Enum):
    ARCHITECTURE = "architecture"
    MACHINE = "machine"
    PLATFORM = "platform"
    EDITION = "edition"


# Nesting order of conditional directories; each enabled dimension sits inside the previous one.
DIMENSION_ORDER = (Dimension.ARCHITECTURE, Dimension.MACHINE, Dimension.PLATFORM, Dimension.EDITION)

DIMENSION_PREFIXES = {
    Dimension.ARCHITECTURE: "_Arch-",
    Dimension.MACHINE: "_Machine-",
    Dimension.PLATFORM: "_Platform-",
    Dimension.EDITION: "_PSEdition-",
}


class Edition(Enum):
    NONE = "none"
    CORE = "core"
    DESKTOP = "desktop"
    ALL = "all"


# Directory names per selector, Core always before Desktop.
EDITION_NAMES = {
    Edition.NONE: (),
    Edition.CORE: ("Core",),
    Edition.DESKTOP: ("Desktop",),
    Edition.ALL: ("Core", "Desktop"),
}


@dataclass(frozen=True)
class DimensionSettings:
    architecture: bool = False
    machine: bool = False
    platform: bool = False
    edition: bool = False
    edition_selector: Edition = Edition.NONE

    def is_enabled(self, dimension):
        if dimension is Dimension.EDITION:
            return self.edition and self.edition_selector is not Edition.NONE
        return getattr(self, dimension.value)


@dataclass(frozen=True)
class EnvironmentFacts:
    architecture: str
    machine: str
    platform: str
