"""Configuration file location.

Environment variables:
    PATHCANON_CONFIG — config file (default: ~/.config/pathcanon/config.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_CONFIG = Path.home() / ".config" / "pathcanon" / "config.yaml"


def config_path(explicit: Path | str | None = None) -> Path:
    """Return the config file path, preferring an explicit one."""
    if explicit:
        return Path(explicit).expanduser()
    env = os.environ.get("PATHCANON_CONFIG")
    if env:
        return Path(env).expanduser()
    return _DEFAULT_CONFIG


def config_is_explicit(explicit: Path | str | None = None) -> bool:
    """True when the config location was chosen by flag or environment."""
    return bool(explicit) or bool(os.environ.get("PATHCANON_CONFIG"))
