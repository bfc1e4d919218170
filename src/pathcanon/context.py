"""Environment context for canonicalization.

Environment variables:
    PATHCANON_FAMILY — force a path family (windows, mingw32, mingw64, cygwin, ...)
    PATHCANON_HOME — override the home directory used for ``~``
    MSYSTEM — set by MSYS2 shells, selects a MinGW family
    OSTYPE — ``cygwin`` inside Cygwin shells
    HOME, USERPROFILE, HOMEDRIVE/HOMEPATH — home directory fallbacks
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from pathcanon.families import FamilyRules, get_family

# MSYSTEM value -> family
_MSYSTEMS = {
    "MINGW32": "mingw32",
    "CLANG32": "mingw32",
    "MINGW64": "mingw64",
    "UCRT64": "mingw64",
    "CLANG64": "mingw64",
    "CLANGARM64": "mingw64",
    "MSYS": "mingw64",
}


def detect_family(environ: Mapping[str, str] | None = None, platform: str | None = None) -> str:
    """Guess the active path family from the environment."""
    env = os.environ if environ is None else environ
    plat = sys.platform if platform is None else platform

    forced = env.get("PATHCANON_FAMILY")
    if forced:
        return forced.lower()
    msystem = env.get("MSYSTEM", "").upper()
    if msystem in _MSYSTEMS:
        return _MSYSTEMS[msystem]
    if "cygwin" in env.get("OSTYPE", "").lower() or plat.startswith("cygwin"):
        return "cygwin"
    return "windows"


def detect_home(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the home directory value, or None when nothing is set."""
    env = os.environ if environ is None else environ
    for var in ("PATHCANON_HOME", "HOME", "USERPROFILE"):
        if env.get(var):
            return env[var]
    if env.get("HOMEDRIVE") and env.get("HOMEPATH"):
        return env["HOMEDRIVE"] + env["HOMEPATH"]
    return None


def _frozen(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class EnvironmentContext:
    """Read-only lookup consumed by ``canonicalize``."""

    home: str | None = None
    family: str = "windows"
    mounts: Mapping[str, str] = field(default_factory=dict)
    mount_prefixes: Mapping[str, str] = field(default_factory=dict)
    strict_escapes: bool = False
    caret_escapes: bool = False
    resolve_links: bool = False

    def __post_init__(self):
        from pathcanon.canon.roots import mount_target

        object.__setattr__(self, "family", self.family.lower())
        object.__setattr__(self, "mounts", _frozen(self.mounts))
        object.__setattr__(
            self, "mount_prefixes",
            _frozen({k.lower(): v for k, v in (self.mount_prefixes or {}).items()}),
        )
        # targets must be absolute drive paths
        for target in self.mounts.values():
            mount_target(target)

    @property
    def rules(self) -> FamilyRules:
        """Active family rules, with any mount-prefix override applied."""
        rules = get_family(self.family)
        override = self.mount_prefixes.get(rules.name)
        if override is not None:
            return rules.with_prefix(override)
        return rules

    def replace(self, **changes) -> EnvironmentContext:
        return replace(self, **changes)

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        config: Mapping | None = None,
        platform: str | None = None,
    ) -> EnvironmentContext:
        """Build a context from environment variables plus config settings.

        Config settings (as returned by ``load_config``) win over detection.
        """
        settings = dict(config or {})
        return cls(
            home=settings.pop("home", None) or detect_home(environ),
            family=settings.pop("family", None) or detect_family(environ, platform),
            **settings,
        )

    def to_dict(self) -> dict:
        return {
            "home": self.home,
            "family": self.family,
            "mounts": dict(self.mounts),
            "mount_prefixes": dict(self.mount_prefixes),
            "strict_escapes": self.strict_escapes,
            "caret_escapes": self.caret_escapes,
            "resolve_links": self.resolve_links,
        }
