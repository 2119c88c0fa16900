"""Shared command helpers."""

from psprofiledirs.core.models import PROFILE_KIND_ORDER, DimensionSettings, Edition, ProfileKind
from psprofiledirs.profile.confirm import approve_all


def ask_yes(prompt):
    try:
        reply = input(f"{prompt} [y/N]: ").strip().lower()
    except EOFError:
        return False
    return reply in ("y", "yes")


def make_confirm(ask):
    """Return a confirmation gate: prompt per action when `ask`, else approve."""
    if not ask:
        return approve_all

    def confirm(description, target):
        return ask_yes(f'{description} "{target}"?')

    return confirm


def resolve_kinds(args):
    requested = [
        kind
        for kind, flag in (
            (ProfileKind.USER, "user"),
            (ProfileKind.HOST, "host"),
            (ProfileKind.TERMINAL, "terminal"),
        )
        if getattr(args, flag, False)
    ]
    return requested or list(PROFILE_KIND_ORDER)


def resolve_dimensions(args):
    selector = Edition(getattr(args, "edition", None) or Edition.NONE.value)
    return DimensionSettings(
        architecture=bool(getattr(args, "arch", False)),
        machine=bool(getattr(args, "machine", False)),
        platform=bool(getattr(args, "platform", False)),
        edition=selector is not Edition.NONE,
        edition_selector=selector,
    )
