"""Tests for the family registry."""

import pytest

from pathcanon import EnvironmentContext, canonicalize
from pathcanon.errors import UnknownFamily
from pathcanon.families import (
    FamilyRules,
    family_names,
    get_family,
    mount_prefixes,
    register_family,
)

WSL = FamilyRules(
    name="wsl",
    separator="/",
    drive_style="mount",
    mount_prefix="/mnt",
    backslash_escapes=True,
    description="Windows Subsystem for Linux",
)


class TestBuiltins:
    def test_builtin_names(self):
        assert family_names() == ["cygwin", "mingw32", "mingw64", "windows"]

    def test_windows_rules(self):
        rules = get_family("windows")
        assert rules.separator == "\\"
        assert rules.drive_style == "letter"
        assert not rules.backslash_escapes

    def test_cygwin_rules(self):
        rules = get_family("cygwin")
        assert rules.mount_prefix == "/cygdrive"
        assert rules.backslash_escapes

    def test_lookup_case_insensitive(self):
        assert get_family("MinGW64").name == "mingw64"

    def test_unknown(self):
        with pytest.raises(UnknownFamily) as exc_info:
            get_family("amiga")
        assert exc_info.value.fragment == "amiga"


class TestRules:
    def test_bad_separator(self):
        with pytest.raises(ValueError):
            FamilyRules(name="x", separator=":", drive_style="letter")

    def test_bad_drive_style(self):
        with pytest.raises(ValueError):
            FamilyRules(name="x", separator="/", drive_style="unc")

    def test_prefix_must_be_absolute(self):
        with pytest.raises(ValueError):
            FamilyRules(name="x", separator="/", drive_style="mount", mount_prefix="mnt")

    def test_with_prefix_root(self):
        assert get_family("cygwin").with_prefix("/").mount_prefix == ""

    def test_with_prefix_normalized(self):
        rules = get_family("cygwin").with_prefix("drives/")
        assert rules.mount_prefix == "/drives"
        assert rules.name == "cygwin"

    def test_to_dict(self):
        assert get_family("mingw32").to_dict()["drive_style"] == "mount"


class TestRegister:
    def test_register_new_family(self):
        register_family(WSL)
        assert "wsl" in family_names()
        assert "/mnt" in mount_prefixes()

    def test_duplicate_rejected(self):
        with pytest.raises(ValueError):
            register_family(get_family("cygwin"))

    def test_replace(self):
        rules = FamilyRules(name="cygwin", separator="/", drive_style="mount", mount_prefix="/cyg")
        register_family(rules, replace=True)
        assert get_family("cygwin").mount_prefix == "/cyg"

    def test_name_lowercased(self):
        register_family(FamilyRules(name="MSYS", separator="/", drive_style="mount"))
        assert get_family("msys").name == "msys"

    def test_new_family_renders(self):
        register_family(WSL)
        ctx = EnvironmentContext(home="/home/u", family="wsl")
        assert canonicalize("C:\\Users\\x", ctx) == "/mnt/c/Users/x"

    def test_new_prefix_recognized_elsewhere(self):
        register_family(WSL)
        ctx = EnvironmentContext(home="/home/u", family="mingw64")
        assert canonicalize("/mnt/d/data", ctx) == "/d/data"

    def test_registry_restored_between_tests(self):
        assert "wsl" not in family_names()
        assert get_family("cygwin").mount_prefix == "/cygdrive"
