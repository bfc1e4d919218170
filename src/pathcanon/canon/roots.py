"""Root detection, mount-table mapping, and rendering.

Recognized roots (independent of the active family):

- ``C:``            drive letter form
- ``/cygdrive/c``   any registered mount prefix followed by a letter
- ``/c``            MinGW drive form (empty mount prefix)
- ``/``             POSIX root without a drive
- nothing           relative path
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from pathcanon.canon.resolver import resolve_segments
from pathcanon.errors import MalformedDriveSpecifier
from pathcanon.families import LETTER, FamilyRules

_DRIVE_RE = re.compile(r"^([A-Za-z]):$")
_DRIVE_RELATIVE_RE = re.compile(r"^[A-Za-z]:.")


@dataclass
class ParsedPath:
    """A path split into its root marker and segments."""

    drive: str | None = None
    rooted: bool = False
    segments: list[str] = field(default_factory=list)


def _is_letter(seg: str) -> bool:
    return len(seg) == 1 and seg.isascii() and seg.isalpha()


def _prefix_parts(prefixes: Iterable[str]) -> list[list[str]]:
    """Non-empty prefixes as lowercase segment lists, longest first."""
    parts = [[p.lower() for p in prefix.split("/") if p] for prefix in prefixes]
    return sorted((p for p in parts if p), key=len, reverse=True)


def parse_drive(segments: list[str]) -> ParsedPath | None:
    """Detect a leading ``X:`` drive segment in a path with no leading separator.

    Returns None when the path doesn't start with a drive.

    Raises:
        MalformedDriveSpecifier: For ``C:rest``, ``CD:``, ``1:`` and similar.
    """
    if not segments:
        return None
    first = segments[0]
    match = _DRIVE_RE.match(first)
    if match:
        return ParsedPath(drive=match.group(1).upper(), rooted=True, segments=segments[1:])
    if _DRIVE_RELATIVE_RE.match(first):
        raise MalformedDriveSpecifier(
            f"Drive-relative path '{first}' is not supported; expected '{first[:2]}\\'",
            fragment=first,
        )
    if first.endswith(":"):
        raise MalformedDriveSpecifier(
            f"'{first}' is not a drive letter followed by ':'",
            fragment=first,
        )
    return None


def parse_posix_drive(segments: list[str], prefixes: Iterable[str]) -> ParsedPath | None:
    """Detect a mount-form drive in already resolved POSIX-rooted segments.

    Returns None when the segments are a plain POSIX path.

    Raises:
        MalformedDriveSpecifier: When a mount prefix is followed by something
            other than a single drive letter.
    """
    if not segments:
        return None
    lowered = [s.lower() for s in segments]
    for parts in _prefix_parts(prefixes):
        n = len(parts)
        if len(segments) > n and lowered[:n] == parts:
            letter = segments[n]
            if not _is_letter(letter):
                fragment = "/" + "/".join(segments[:n + 1])
                raise MalformedDriveSpecifier(
                    f"'{fragment}' must be followed by a single drive letter",
                    fragment=fragment,
                )
            return ParsedPath(drive=letter.upper(), rooted=True, segments=segments[n + 1:])
    match = _DRIVE_RE.match(segments[0])
    if match:
        # /C:/Users/x, as found in file URIs
        return ParsedPath(drive=match.group(1).upper(), rooted=True, segments=segments[1:])
    if "" in prefixes and _is_letter(segments[0]):
        return ParsedPath(drive=segments[0].upper(), rooted=True, segments=segments[1:])
    return None


def _split_any(path: str) -> list[str]:
    return [s for s in re.split(r"[\\/]+", path) if s]


def mount_target(target: str) -> ParsedPath:
    """Parse a mount-table target, which must be an absolute drive path.

    Raises:
        MalformedDriveSpecifier: If the target has no drive.
        EscapesRoot: If the target climbs above its drive root.
    """
    segments = _split_any(target)
    parsed = parse_drive(segments)
    if parsed is None:
        raise MalformedDriveSpecifier(
            f"Mount target '{target}' must be a drive path such as 'C:\\msys64'",
            fragment=target,
        )
    parsed.segments = resolve_segments(parsed.segments, rooted=True, source=target)
    return parsed


def _startswith(segments: list[str], prefix: list[str]) -> bool:
    if len(prefix) > len(segments):
        return False
    return [s.casefold() for s in segments[:len(prefix)]] == [p.casefold() for p in prefix]


def apply_mounts(
    parsed: ParsedPath,
    rules: FamilyRules,
    mounts: Mapping[str, str],
    prefixes: Iterable[str],
) -> ParsedPath:
    """Translate between POSIX mount points and Windows directories.

    Letter-style families map POSIX-rooted paths onto the Windows directory
    of the longest matching mount point. Mount-style families map drive
    paths under a mounted Windows directory back onto the mount point,
    unless the result would read back as a drive path.
    """
    if not mounts or not parsed.rooted:
        return parsed

    if rules.drive_style == LETTER:
        if parsed.drive is not None:
            return parsed
        best: tuple[list[str], str] | None = None
        for point, target in mounts.items():
            point_parts = _split_any(point)
            if _startswith(parsed.segments, point_parts) and (
                best is None or len(point_parts) > len(best[0])
            ):
                best = (point_parts, target)
        if best is None:
            return parsed
        target = mount_target(best[1])
        rest = parsed.segments[len(best[0]):]
        return ParsedPath(drive=target.drive, rooted=True, segments=target.segments + rest)

    if parsed.drive is None:
        return parsed
    candidate: tuple[int, ParsedPath] | None = None
    for point, target_str in mounts.items():
        target = mount_target(target_str)
        if target.drive != parsed.drive or not _startswith(parsed.segments, target.segments):
            continue
        if candidate is not None and len(target.segments) <= candidate[0]:
            continue
        mapped = _split_any(point) + parsed.segments[len(target.segments):]
        try:
            if parse_posix_drive(mapped, prefixes) is not None:
                continue
        except MalformedDriveSpecifier:
            continue
        candidate = (len(target.segments), ParsedPath(rooted=True, segments=mapped))
    return candidate[1] if candidate else parsed


def render(parsed: ParsedPath, rules: FamilyRules) -> str:
    """Render a resolved path in the family's canonical form."""
    sep = rules.separator
    body = sep.join(parsed.segments)

    if parsed.drive is not None:
        if rules.drive_style == LETTER:
            return f"{parsed.drive}:{sep}{body}"
        root = f"{rules.mount_prefix}/{parsed.drive.lower()}"
        return f"{root}{sep}{body}" if body else root

    if parsed.rooted:
        return sep + body
    if not body:
        return "."
    if body.startswith("~"):
        # keep a relative "~name" segment from reading back as home shorthand
        return f".{sep}{body}"
    return body
