"""Load and validate the pathcanon YAML config file.

Example::

    family: cygwin
    home: C:\\Users\\me
    strict_escapes: false
    mounts:
      /home: C:\\Users
    mount_prefixes:
      cygwin: /
    families:
      - name: wsl
        separator: /
        drive_style: mount
        mount_prefix: /mnt
"""

from __future__ import annotations

import warnings
from pathlib import Path

import yaml

from pathcanon.canon.roots import mount_target
from pathcanon.errors import ConfigError, PathError
from pathcanon.families import FamilyRules, register_family
from pathcanon.paths import config_is_explicit, config_path

_BOOL_KEYS = {"strict_escapes", "caret_escapes", "resolve_links"}
_STR_KEYS = {"family", "home"}
_MAP_KEYS = {"mounts", "mount_prefixes"}
KNOWN_KEYS = _BOOL_KEYS | _STR_KEYS | _MAP_KEYS | {"families"}


def read_config(path: Path | str) -> dict:
    """Read and parse a config file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ConfigError: If the document is not a mapping.
    """
    cfg_path = Path(path)
    with open(cfg_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config at {cfg_path} is not a YAML mapping")
    return data


def validate_config(data: dict) -> dict:
    """Check value types and return the recognized settings.

    Unknown keys are reported with ``warnings.warn`` and dropped.
    """
    settings: dict = {}
    for key, value in data.items():
        if key not in KNOWN_KEYS:
            warnings.warn(f"Ignoring unknown config key '{key}'")
            continue
        if key in _BOOL_KEYS:
            if not isinstance(value, bool):
                raise ConfigError(f"{key}: expected true/false, got {value!r}")
        elif key in _STR_KEYS:
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{key}: expected a non-empty string, got {value!r}")
        elif key in _MAP_KEYS:
            if not isinstance(value, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in value.items()
            ):
                raise ConfigError(f"{key}: expected a mapping of strings")
            if key == "mounts":
                for point, target in value.items():
                    try:
                        mount_target(target)
                    except PathError as e:
                        raise ConfigError(f"mounts: {point}: {e}") from e
        elif key == "families":
            if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
                raise ConfigError("families: expected a list of mappings")
        settings[key] = value
    return settings


def _family_rules(entry: dict) -> FamilyRules:
    try:
        return FamilyRules(**entry)
    except TypeError as e:
        raise ConfigError(f"families: invalid entry {entry!r}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"families: {e}") from e


def load_config(path: Path | str | None = None) -> dict:
    """Load settings from the config file and register its extra families.

    A missing file at the default location yields no settings; a missing
    file that was asked for explicitly raises ``FileNotFoundError``.

    Args:
        path: Explicit config path. Falls back to ``PATHCANON_CONFIG`` and
            then the default location.

    Returns:
        Validated settings dict (without the ``families`` key).
    """
    cfg_path = config_path(path)
    if not cfg_path.is_file() and not config_is_explicit(path):
        return {}

    settings = validate_config(read_config(cfg_path))
    for entry in settings.pop("families", []):
        register_family(_family_rules(entry), replace=True)
    return settings
