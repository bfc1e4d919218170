"""Canonicalize Windows-family path strings.

Pipeline:
    caret escapes (opt-in) -> home expansion -> namespace/UNC checks ->
    separator scan -> root detection -> dot-segment resolution ->
    mount-table mapping -> render -> symlink resolution (opt-in)

Every stage before the last is lexical, so non-existent paths canonicalize
the same way existing ones do.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pathcanon.canon import links
from pathcanon.canon.resolver import resolve_segments
from pathcanon.canon.roots import (
    ParsedPath,
    apply_mounts,
    parse_drive,
    parse_posix_drive,
    render,
)
from pathcanon.canon.tokenizer import (
    reject_unc,
    split_home,
    split_segments,
    strip_carets,
    strip_namespace_prefix,
)
from pathcanon.context import EnvironmentContext
from pathcanon.errors import EmptyPath, MalformedDriveSpecifier, PathError
from pathcanon.families import FamilyRules, mount_prefixes


def _prefixes(ctx: EnvironmentContext, rules: FamilyRules) -> set[str]:
    prefixes = mount_prefixes() | {rules.mount_prefix}
    for value in ctx.mount_prefixes.values():
        prefixes.add("" if value in ("", "/") else "/" + value.strip("/"))
    return prefixes


def _posix_rooted(segments: list[str], prefixes: set[str], source: str) -> ParsedPath:
    # A mount-form drive is a root marker, so ".." can't climb above it
    try:
        parsed = parse_posix_drive(segments, prefixes)
    except MalformedDriveSpecifier:
        parsed = None
    if parsed is not None:
        parsed.segments = resolve_segments(parsed.segments, rooted=True, source=source)
        return parsed
    resolved = resolve_segments(segments, rooted=True, source=source)
    return parse_posix_drive(resolved, prefixes) or ParsedPath(rooted=True, segments=resolved)


def parse(raw: str, ctx: EnvironmentContext, rules: FamilyRules | None = None) -> ParsedPath:
    """Run the lexical stages and return the resolved, mapped path."""
    rules = rules or ctx.rules
    if not raw:
        raise EmptyPath("Cannot canonicalize an empty path", fragment=raw)

    text = strip_carets(raw) if ctx.caret_escapes else raw
    home, rest = split_home(text, ctx.home, rules.backslash_escapes)
    if home:
        home = strip_namespace_prefix(home)
    else:
        rest = strip_namespace_prefix(rest)
    text = home + rest
    reject_unc(text)

    leading, segments = split_segments(
        text, rules, strict=ctx.strict_escapes, literal=len(home),
    )
    prefixes = _prefixes(ctx, rules)

    if leading:
        parsed = _posix_rooted(segments, prefixes, raw)
    else:
        parsed = parse_drive(segments)
        if parsed is not None:
            parsed.segments = resolve_segments(parsed.segments, rooted=True, source=raw)
        else:
            resolved = resolve_segments(segments, rooted=False, source=raw)
            if parse_drive(resolved) is not None:
                raise MalformedDriveSpecifier(
                    f"Drive '{resolved[0]}' must be at the start of '{raw}'",
                    fragment=resolved[0],
                )
            parsed = ParsedPath(segments=resolved)

    return apply_mounts(parsed, rules, ctx.mounts, prefixes)


def canonicalize(raw: str, ctx: EnvironmentContext | None = None) -> str:
    """Canonicalize a path string for the context's path family.

    Args:
        raw: Path in any mix of Windows, MinGW and Cygwin notation.
        ctx: Environment context. Defaults to one detected from
            ``os.environ``.

    Returns:
        Canonical path string.

    Raises:
        PathError: Subclass describing why the path can't be canonicalized.

    Examples:
        >>> ctx = EnvironmentContext(family="cygwin")
        >>> canonicalize("C:\\\\Users\\\\x", ctx)
        '/cygdrive/c/Users/x'
        >>> canonicalize("/f/Downloads/../", EnvironmentContext(family="windows"))
        'F:\\\\'
    """
    ctx = ctx if ctx is not None else EnvironmentContext.from_environ()
    rules = ctx.rules
    parsed = parse(raw, ctx, rules)
    lexical = render(parsed, rules)

    if not ctx.resolve_links or not parsed.rooted:
        return lexical

    target = links.follow_links(links.host_form(parsed, rules))
    if target is None:
        return lexical
    try:
        return render(parse(target, ctx, rules), rules)
    except PathError:
        return lexical


@dataclass
class CanonicalResult:
    """Outcome of one canonicalization, with errors as values."""

    raw: str
    path: str | None = None
    error: PathError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def summary(self) -> str:
        if self.ok:
            return str(self.path)
        return f"ERROR: {self.error.reason}: {self.error}"

    def to_dict(self) -> dict:
        return {
            "input": self.raw,
            "path": self.path,
            "error": self.error.to_dict() if self.error else None,
        }


def try_canonicalize(raw: str, ctx: EnvironmentContext | None = None) -> CanonicalResult:
    """Like ``canonicalize``, but report failures in the result."""
    try:
        return CanonicalResult(raw=raw, path=canonicalize(raw, ctx))
    except PathError as e:
        return CanonicalResult(raw=raw, error=e)


def canonicalize_many(
    raws: Iterable[str], ctx: EnvironmentContext | None = None,
) -> list[CanonicalResult]:
    """Canonicalize several paths against one context."""
    ctx = ctx if ctx is not None else EnvironmentContext.from_environ()
    return [try_canonicalize(raw, ctx) for raw in raws]
