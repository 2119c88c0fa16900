"""Path-tree rendering.

Each plan entry is rendered on its own, with its neighbours in the plan
(prequel/sequel) and the final entry of the plan (last) as context:

    profile
    ├── _Arch-X64
       ┼── _Platform-Linux
          ┼── _PSEdition-Core
          └── _PSEdition-Desktop

Segments shared with the prequel are not printed again, so consecutive
entries merge into one tree. Rendering is pure text; existence and color
are applied by the caller.
"""

from dataclasses import dataclass

from psprofiledirs.core.errors import PreconditionError


@dataclass(frozen=True)
class GlyphSet:
    branch: str
    last: str
    cross: str
    pipe: str
    blank: str
    root_icon: str
    folder_icon: str
    # Ordered (name prefix, icon) pairs; first match wins.
    icons: tuple


UNICODE_GLYPHS = GlyphSet(
    branch="├──",
    last="└──",
    cross="┼──",
    pipe="│  ",
    blank="   ",
    root_icon="👤",
    folder_icon="📁",
    icons=(
        ("_Arch", "🧬"),
        ("_Machine", "💻"),
        ("_Platform", "🌐"),
        ("_PSEdition", "⚡"),
    ),
)

ASCII_GLYPHS = GlyphSet(
    branch="|--",
    last="`--",
    cross="+--",
    pipe="|  ",
    blank="   ",
    root_icon="[~]",
    folder_icon="[d]",
    icons=(
        ("_Arch", "[a]"),
        ("_Machine", "[m]"),
        ("_Platform", "[p]"),
        ("_PSEdition", "[e]"),
    ),
)


@dataclass(frozen=True)
class TreeLine:
    segments: tuple
    depth: int
    text: str


def icon_for(name, glyphs=UNICODE_GLYPHS, root=False):
    if root:
        return glyphs.root_icon
    for prefix, icon in glyphs.icons:
        if name.startswith(prefix):
            return icon
    return glyphs.folder_icon


def _has_qualifying_sequel(current, sequel):
    return sequel is not None and len(sequel) >= len(current)


def connector_and_indent(depth, current, last, prequel, sequel, glyphs=UNICODE_GLYPHS):
    """Return (connector, indent) for the segment of `current` at `depth` (1-based).

    Each ancestor level contributes `blank` when it lies on the path to the
    last entry of the plan (no more branches follow at that level) and
    `pipe` otherwise.
    """
    if _has_qualifying_sequel(current, sequel):
        if depth > 1:
            connector = glyphs.cross
        elif prequel is None or prequel[0] != current[0] or len(current) > 1:
            connector = glyphs.branch
        else:
            connector = glyphs.last
    else:
        connector = glyphs.last

    tokens = []
    for level in range(1, depth):
        on_last_path = last is not None and tuple(last[:level]) == tuple(current[:level])
        tokens.append(glyphs.blank if on_last_path else glyphs.pipe)
    return connector, "".join(tokens)


def is_new_segment(depth, current, prequel):
    """True when the segment at `depth` was not already printed for the prequel."""
    if prequel is None or len(prequel) < depth:
        return True
    return tuple(prequel[:depth]) != tuple(current[:depth])


def _check_segments(path):
    if not path:
        raise PreconditionError("cannot render an empty path", context={"path": path})
    for segment in path:
        if not isinstance(segment, str) or not segment:
            raise PreconditionError("path segments must be non-empty strings", context={"path": path})


def render_root(name, glyphs=UNICODE_GLYPHS):
    return TreeLine(segments=(), depth=0, text=f"{icon_for(name, glyphs, root=True)} {name}")


def render_entry(path, prequel=None, sequel=None, last=None, glyphs=UNICODE_GLYPHS):
    """Render the not-yet-printed segments of one plan entry."""
    path = tuple(path)
    _check_segments(path)
    if last is None:
        last = path
    lines = []
    _render_from(1, path, prequel, sequel, last, glyphs, lines)
    return lines


def _render_from(depth, path, prequel, sequel, last, glyphs, lines):
    if depth > len(path):
        return
    if is_new_segment(depth, path, prequel):
        connector, indent = connector_and_indent(depth, path, last, prequel, sequel, glyphs)
        name = path[depth - 1]
        lines.append(
            TreeLine(
                segments=path[:depth],
                depth=depth,
                text=f"{indent}{connector} {icon_for(name, glyphs)} {name}",
            )
        )
    _render_from(depth + 1, path, prequel, sequel, last, glyphs, lines)


def with_neighbors(plan):
    """Yield (prequel, entry, sequel, last) for every entry of a plan."""
    plan = [tuple(p) for p in plan]
    last = plan[-1] if plan else None
    for i, entry in enumerate(plan):
        prequel = plan[i - 1] if i > 0 else None
        sequel = plan[i + 1] if i + 1 < len(plan) else None
        yield prequel, entry, sequel, last


def render_plan(root_name, plan, glyphs=UNICODE_GLYPHS):
    """Render a profile root followed by every entry of its plan."""
    lines = [render_root(root_name, glyphs)]
    for prequel, entry, sequel, last in with_neighbors(plan):
        lines.extend(render_entry(entry, prequel, sequel, last, glyphs))
    return lines
