"""Path family definitions — single source of truth.

A family describes how a canonical path looks in one environment: which
separator it uses, whether drives are written as ``C:\\`` or mounted under a
POSIX prefix, and whether a backslash may escape shell metacharacters.

New conventions are added with ``register_family``; the resolution code only
ever reads ``FamilyRules`` and never branches on a family name.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from pathcanon.errors import UnknownFamily

LETTER = "letter"
MOUNT = "mount"
_DRIVE_STYLES = {LETTER, MOUNT}


@dataclass(frozen=True)
class FamilyRules:
    """Rendering and parsing rules for one path family."""

    name: str
    separator: str
    drive_style: str
    mount_prefix: str = ""
    backslash_escapes: bool = False
    description: str = ""

    def __post_init__(self):
        if self.separator not in ("/", "\\"):
            raise ValueError(f"Family '{self.name}': separator must be '/' or a backslash")
        if self.drive_style not in _DRIVE_STYLES:
            raise ValueError(
                f"Family '{self.name}': drive_style must be one of "
                f"{', '.join(sorted(_DRIVE_STYLES))}"
            )
        if self.mount_prefix and not self.mount_prefix.startswith("/"):
            raise ValueError(f"Family '{self.name}': mount_prefix must start with '/'")

    def with_prefix(self, prefix: str) -> FamilyRules:
        """Copy of these rules with a different mount prefix."""
        prefix = "" if prefix in ("", "/") else "/" + prefix.strip("/")
        return FamilyRules(**{**asdict(self), "mount_prefix": prefix})

    def to_dict(self) -> dict:
        return asdict(self)


_BUILTIN = [
    FamilyRules(
        name="windows",
        separator="\\",
        drive_style=LETTER,
        description="Native Windows (C:\\Users\\x)",
    ),
    FamilyRules(
        name="mingw32",
        separator="/",
        drive_style=MOUNT,
        backslash_escapes=True,
        description="MinGW32 / MSYS2 32-bit shell (/c/Users/x)",
    ),
    FamilyRules(
        name="mingw64",
        separator="/",
        drive_style=MOUNT,
        backslash_escapes=True,
        description="MinGW64 / MSYS2 64-bit shell (/c/Users/x)",
    ),
    FamilyRules(
        name="cygwin",
        separator="/",
        drive_style=MOUNT,
        mount_prefix="/cygdrive",
        backslash_escapes=True,
        description="Cygwin (/cygdrive/c/Users/x)",
    ),
]

FAMILIES: dict[str, FamilyRules] = {rules.name: rules for rules in _BUILTIN}


def register_family(rules: FamilyRules, replace: bool = False) -> FamilyRules:
    """Add a family to the registry.

    Args:
        rules: Rules to register. The name is stored lowercased.
        replace: Overwrite an existing family of the same name.

    Returns:
        The registered rules.

    Raises:
        ValueError: If the name is taken and ``replace`` is False.
    """
    key = rules.name.lower()
    if key in FAMILIES and not replace:
        raise ValueError(f"Family '{key}' is already registered")
    if key != rules.name:
        rules = FamilyRules(**{**asdict(rules), "name": key})
    FAMILIES[key] = rules
    return rules


def get_family(name: str) -> FamilyRules:
    """Look up a family by name (case-insensitive)."""
    rules = FAMILIES.get(name.lower())
    if rules is None:
        raise UnknownFamily(
            f"Unknown path family '{name}' (known: {', '.join(family_names())})",
            fragment=name,
        )
    return rules


def family_names() -> list[str]:
    return sorted(FAMILIES)


def mount_prefixes() -> set[str]:
    """Every drive mount prefix used by a registered mount-style family."""
    return {r.mount_prefix for r in FAMILIES.values() if r.drive_style == MOUNT}
