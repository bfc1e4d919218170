"""Canonicalization pipeline — tokenize, resolve, map roots, render."""

from pathcanon.canon.core import (
    CanonicalResult,
    canonicalize,
    canonicalize_many,
    parse,
    try_canonicalize,
)

__all__ = [
    "CanonicalResult",
    "canonicalize",
    "canonicalize_many",
    "parse",
    "try_canonicalize",
]
