"""Lexical front end: caret escapes, home expansion, separator scanning.

Separator classification:
- ``/`` is always a separator.
- ``\\`` is a separator, except in families with ``backslash_escapes`` where a
  backslash directly before a shell metacharacter (``\\ ``, ``\\$``, ...) is
  taken as an escape and kept inside the segment.
- Input that opens with a drive letter (``C:\\$Recycle.Bin``) and the
  expanded home directory are Windows notation; their backslashes are always
  separators.
- Runs of separators collapse to one.
"""

from __future__ import annotations

import re

from pathcanon.errors import (
    AmbiguousEscape,
    HomeUnresolvable,
    UnsupportedHomeForm,
    UnsupportedUNCPath,
)
from pathcanon.families import FamilyRules

SEPARATORS = "/\\"

# Characters a POSIX shell lets a backslash escape inside a word
ESCAPABLE = frozenset(" \t\"'$`&;|()<>*?[]!#{}")

_CARET_RE = re.compile(r"\^(.)", re.DOTALL)
# \\?\C:\... and \\.\C:\... Win32 namespace prefixes
_NAMESPACE_RE = re.compile(r"^[\\/]{2}[?.][\\/](?=[A-Za-z]:)")
# Text opening with a drive letter is Windows notation and has no escapes
_DRIVE_START_RE = re.compile(r"[A-Za-z]:")


def strip_carets(raw: str) -> str:
    """Remove cmd.exe ``^`` escapes: ``^x`` becomes ``x``."""
    return _CARET_RE.sub(r"\1", raw)


def split_home(raw: str, home: str | None, escapes: bool = False) -> tuple[str, str]:
    """Split ``raw`` into the expanded home directory and the rest.

    ``~`` alone and ``~`` followed by a separator are expanded; ``~user``
    is rejected. With ``escapes``, ``~\\ x`` names the literal file ``~ x``
    and is left alone. The home prefix is empty when nothing was expanded.
    """
    if not raw.startswith("~"):
        return "", raw
    if escapes and raw[1:2] == "\\" and raw[2:3] in ESCAPABLE:
        return "", raw
    if len(raw) > 1 and raw[1] not in SEPARATORS:
        name = re.split(r"[\\/]", raw, maxsplit=1)[0]
        raise UnsupportedHomeForm(
            f"Cannot expand '{name}': only '~' for the current user is supported",
            fragment=name,
        )
    if not home:
        raise HomeUnresolvable("No home directory is available to expand '~'", fragment="~")
    if len(raw) == 1:
        return home, ""
    # "/" as home would otherwise yield a leading "//"
    return home.rstrip(SEPARATORS), raw[1:]


def expand_home(raw: str, home: str | None, escapes: bool = False) -> str:
    """Replace a leading ``~`` with the home directory."""
    return "".join(split_home(raw, home, escapes))


def strip_namespace_prefix(path: str) -> str:
    """Drop a ``\\\\?\\`` or ``\\\\.\\`` prefix in front of a drive path."""
    return _NAMESPACE_RE.sub("", path, count=1)


def reject_unc(path: str) -> None:
    """Raise for ``\\\\server\\share`` style input."""
    if len(path) >= 2 and path[0] in SEPARATORS and path[1] in SEPARATORS:
        parts = [p for p in re.split(r"[\\/]+", path) if p][:2]
        fragment = path[:2] + "\\".join(parts)
        raise UnsupportedUNCPath(f"UNC paths are not supported: '{fragment}'", fragment=fragment)


def split_segments(
    path: str, rules: FamilyRules, strict: bool = False, literal: int = 0,
) -> tuple[bool, list[str]]:
    """Scan ``path`` into segments.

    Args:
        path: Input after home expansion.
        rules: Active family rules (decides whether ``\\`` may escape).
        strict: Raise ``AmbiguousEscape`` instead of keeping escapes.
        literal: Length of the expanded home directory at the start of
            ``path``. Backslashes in it are always separators.

    Returns:
        (leading_separator, segments) tuple. Empty segments are never
        produced.
    """
    escapes = rules.backslash_escapes and not _DRIVE_START_RE.match(path, literal)
    segments: list[str] = []
    current: list[str] = []
    leading = False
    i = 0
    n = len(path)

    while i < n:
        ch = path[i]
        if ch == "\\" and escapes and i >= literal and i + 1 < n and path[i + 1] in ESCAPABLE:
            if strict:
                raise AmbiguousEscape(
                    f"Backslash at offset {i} may be an escape or a separator",
                    fragment=path[i:i + 2],
                )
            current.append(path[i:i + 2])
            i += 2
            continue
        if ch in SEPARATORS:
            if i == 0:
                leading = True
            if current:
                segments.append("".join(current))
                current = []
        else:
            current.append(ch)
        i += 1

    if current:
        segments.append("".join(current))
    return leading, segments
