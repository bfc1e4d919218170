"""pathcanon — canonical paths for Windows, MinGW and Cygwin environments."""

from pathcanon.canon import CanonicalResult, canonicalize, canonicalize_many, try_canonicalize
from pathcanon.context import EnvironmentContext, detect_family, detect_home
from pathcanon.errors import (
    AmbiguousEscape,
    ConfigError,
    EmptyPath,
    EscapesRoot,
    HomeUnresolvable,
    MalformedDriveSpecifier,
    PathError,
    UnknownFamily,
    UnsupportedHomeForm,
    UnsupportedUNCPath,
)
from pathcanon.families import FamilyRules, family_names, get_family, register_family

__version__ = "0.1.0"

__all__ = [
    "AmbiguousEscape",
    "CanonicalResult",
    "ConfigError",
    "EmptyPath",
    "EnvironmentContext",
    "EscapesRoot",
    "FamilyRules",
    "HomeUnresolvable",
    "MalformedDriveSpecifier",
    "PathError",
    "UnknownFamily",
    "UnsupportedHomeForm",
    "UnsupportedUNCPath",
    "canonicalize",
    "canonicalize_many",
    "detect_family",
    "detect_home",
    "family_names",
    "get_family",
    "register_family",
    "try_canonicalize",
]
