"""Error taxonomy for path canonicalization.

Every failure carries a stable ``reason`` string (used by the CLI and by
``CanonicalResult.to_dict``) and, when available, the ``fragment`` of the
input that triggered it.
"""

from __future__ import annotations


class PathError(ValueError):
    """Base class for all canonicalization failures."""

    reason = "path-error"

    def __init__(self, message: str, fragment: str | None = None):
        super().__init__(message)
        self.fragment = fragment

    def to_dict(self) -> dict:
        return {
            "reason": self.reason,
            "message": str(self),
            "fragment": self.fragment,
        }


class EmptyPath(PathError):
    reason = "empty-path"


class UnsupportedHomeForm(PathError):
    """``~user`` forms: only the current user's home is expanded."""

    reason = "unsupported-home-form"


class HomeUnresolvable(PathError):
    reason = "home-unresolvable"


class EscapesRoot(PathError):
    """A ``..`` segment climbed above a drive or POSIX root."""

    reason = "escapes-root"


class MalformedDriveSpecifier(PathError):
    reason = "malformed-drive-specifier"


class AmbiguousEscape(PathError):
    """Raised in strict mode for a backslash that could be an escape."""

    reason = "ambiguous-escape"


class UnsupportedUNCPath(PathError):
    reason = "unsupported-unc-path"


class UnknownFamily(PathError):
    reason = "unknown-family"


class ConfigError(ValueError):
    """Invalid configuration file contents."""
