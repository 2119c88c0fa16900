"""Conditional directory-set synthesis.

Enabled dimensions are nested as a chain in the fixed order
Architecture -> Machine -> Platform -> Edition. Every link of the chain is
its own plan entry, so the plan is also a parent-first creation order:

    arch + platform + edition=all  ->
        (_Arch-X64,)
        (_Arch-X64, _Platform-Linux)
        (_Arch-X64, _Platform-Linux, _PSEdition-Core)
        (_Arch-X64, _Platform-Linux, _PSEdition-Desktop)

Edition is the only dimension that can fan out; its directories are
siblings under the deepest other enabled dimension (or top-level entries
when nothing else is enabled).
"""

from psprofiledirs.core.models import (
    DIMENSION_ORDER,
    DIMENSION_PREFIXES,
    EDITION_NAMES,
    Dimension,
)


def dimension_values(dimension, dims, facts):
    """Return the directory-name values one enabled dimension contributes."""
    if dimension is Dimension.ARCHITECTURE:
        return (facts.architecture,)
    if dimension is Dimension.MACHINE:
        return (facts.machine,)
    if dimension is Dimension.PLATFORM:
        return (facts.platform,)
    return EDITION_NAMES[dims.edition_selector]


def dimension_segments(dimension, dims, facts):
    prefix = DIMENSION_PREFIXES[dimension]
    return tuple(f"{prefix}{value}" for value in dimension_values(dimension, dims, facts))


def plan_directories(dims, facts):
    """Return the ordered conditional sub-directories for one profile root.

    Pure and deterministic; an empty list means only the profile root itself
    is needed.
    """
    plan = []
    chain = ()
    for dimension in DIMENSION_ORDER:
        if not dims.is_enabled(dimension):
            continue
        segments = dimension_segments(dimension, dims, facts)
        for segment in segments:
            plan.append(chain + (segment,))
        if len(segments) == 1:
            chain = chain + segments
    return plan
