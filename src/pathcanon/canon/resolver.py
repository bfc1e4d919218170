"""Dot-segment resolution."""

from __future__ import annotations

from pathcanon.errors import EscapesRoot


def resolve_segments(segments: list[str], rooted: bool, source: str = "") -> list[str]:
    """Collapse ``.`` and ``..`` against a stack of resolved segments.

    Rooted paths may not climb above their root. Relative paths keep
    leading ``..`` segments since there is nothing to pop.

    Args:
        segments: Segments after the root marker.
        rooted: Whether the segments hang off a drive or POSIX root.
        source: Original input, used in error messages.

    Returns:
        Resolved segments.

    Raises:
        EscapesRoot: If ``..`` would pop past the root.
    """
    stack: list[str] = []
    for seg in segments:
        if seg == ".":
            continue
        if seg == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            elif rooted:
                raise EscapesRoot(
                    f"'{source}' climbs above its root" if source else "Path climbs above its root",
                    fragment=source or "..",
                )
            else:
                stack.append(seg)
            continue
        stack.append(seg)
    return stack
