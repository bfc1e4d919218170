"""Shared test fixtures for pathcanon."""

from pathlib import Path

import pytest

from pathcanon import paths
from pathcanon.context import EnvironmentContext
from pathcanon.families import FAMILIES

FIXTURES = Path(__file__).parent / "fixtures"

_ENV_VARS = (
    "PATHCANON_CONFIG",
    "PATHCANON_FAMILY",
    "PATHCANON_HOME",
    "MSYSTEM",
    "OSTYPE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the host's shell, config file and family registry out of tests."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(paths, "_DEFAULT_CONFIG", tmp_path / "no-config.yaml")
    saved = dict(FAMILIES)
    yield
    FAMILIES.clear()
    FAMILIES.update(saved)


@pytest.fixture
def windows_ctx():
    return EnvironmentContext(home="C:\\Users\\valarauca", family="windows")


@pytest.fixture
def mingw64_ctx():
    return EnvironmentContext(home="/home/u", family="mingw64")


@pytest.fixture
def mingw32_ctx():
    return EnvironmentContext(home="/home/u", family="mingw32")


@pytest.fixture
def cygwin_ctx():
    return EnvironmentContext(home="/home/u", family="cygwin")
