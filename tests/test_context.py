"""Tests for environment detection and EnvironmentContext."""

import pytest

from pathcanon.context import EnvironmentContext, detect_family, detect_home
from pathcanon.errors import EscapesRoot, MalformedDriveSpecifier, UnknownFamily


class TestDetectFamily:
    @pytest.mark.parametrize("msystem, expected", [
        ("MINGW32", "mingw32"),
        ("CLANG32", "mingw32"),
        ("MINGW64", "mingw64"),
        ("UCRT64", "mingw64"),
        ("CLANG64", "mingw64"),
        ("MSYS", "mingw64"),
        ("mingw64", "mingw64"),
    ])
    def test_msystem(self, msystem, expected):
        assert detect_family({"MSYSTEM": msystem}, "win32") == expected

    def test_ostype_cygwin(self):
        assert detect_family({"OSTYPE": "cygwin"}, "win32") == "cygwin"

    def test_platform_cygwin(self):
        assert detect_family({}, "cygwin") == "cygwin"

    def test_default_windows(self):
        assert detect_family({}, "win32") == "windows"

    def test_forced(self):
        env = {"PATHCANON_FAMILY": "Cygwin", "MSYSTEM": "MINGW64"}
        assert detect_family(env, "win32") == "cygwin"

    def test_unknown_msystem_ignored(self):
        assert detect_family({"MSYSTEM": "AMIGA"}, "win32") == "windows"


class TestDetectHome:
    def test_override_first(self):
        env = {"PATHCANON_HOME": "/h/override", "HOME": "/home/u"}
        assert detect_home(env) == "/h/override"

    def test_home(self):
        assert detect_home({"HOME": "/home/u", "USERPROFILE": "C:\\Users\\u"}) == "/home/u"

    def test_userprofile(self):
        assert detect_home({"USERPROFILE": "C:\\Users\\u"}) == "C:\\Users\\u"

    def test_homedrive_homepath(self):
        assert detect_home({"HOMEDRIVE": "D:", "HOMEPATH": "\\Users\\u"}) == "D:\\Users\\u"

    def test_nothing(self):
        assert detect_home({}) is None


class TestEnvironmentContext:
    def test_defaults(self):
        ctx = EnvironmentContext()
        assert ctx.family == "windows"
        assert ctx.home is None
        assert not ctx.strict_escapes

    def test_family_lowercased(self):
        assert EnvironmentContext(family="MinGW64").family == "mingw64"

    def test_rules(self):
        assert EnvironmentContext(family="cygwin").rules.mount_prefix == "/cygdrive"

    def test_prefix_override(self):
        ctx = EnvironmentContext(family="cygwin", mount_prefixes={"Cygwin": "/"})
        assert ctx.rules.mount_prefix == ""

    def test_unknown_family_rules(self):
        with pytest.raises(UnknownFamily):
            EnvironmentContext(family="amiga").rules

    def test_mounts_read_only(self):
        ctx = EnvironmentContext(mounts={"/": "C:\\msys64"})
        with pytest.raises(TypeError):
            ctx.mounts["/opt"] = "C:\\opt"

    def test_mounts_copied(self):
        mounts = {"/": "C:\\msys64"}
        ctx = EnvironmentContext(mounts=mounts)
        mounts["/opt"] = "C:\\opt"
        assert "/opt" not in ctx.mounts

    def test_replace(self):
        ctx = EnvironmentContext(family="cygwin", home="/home/u")
        strict = ctx.replace(strict_escapes=True)
        assert strict.strict_escapes
        assert not ctx.strict_escapes
        assert strict.home == "/home/u"

    def test_from_environ(self):
        ctx = EnvironmentContext.from_environ(
            {"MSYSTEM": "MINGW32", "HOME": "/home/u"}, platform="win32",
        )
        assert ctx.family == "mingw32"
        assert ctx.home == "/home/u"

    def test_from_environ_config_wins(self):
        ctx = EnvironmentContext.from_environ(
            {"MSYSTEM": "MINGW32", "HOME": "/home/u"},
            config={"family": "cygwin", "home": "C:\\Users\\u", "strict_escapes": True},
            platform="win32",
        )
        assert ctx.family == "cygwin"
        assert ctx.home == "C:\\Users\\u"
        assert ctx.strict_escapes

    def test_to_dict(self):
        d = EnvironmentContext(family="cygwin", mounts={"/home": "C:\\Users"}).to_dict()
        assert d["family"] == "cygwin"
        assert d["mounts"] == {"/home": "C:\\Users"}
        assert d["resolve_links"] is False

    def test_bad_mount_target(self):
        with pytest.raises(MalformedDriveSpecifier) as exc_info:
            EnvironmentContext(family="cygwin", mounts={"/opt": "relative\\dir"})
        assert exc_info.value.fragment == "relative\\dir"

    def test_replace_checks_mount_targets(self):
        ctx = EnvironmentContext(family="mingw64", mounts={"/": "C:\\msys64"})
        with pytest.raises(EscapesRoot):
            ctx.replace(mounts={"/": "C:\\.."})
