import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

from psprofiledirs.core.models import ProfileKind
from psprofiledirs.core.tree import ASCII_GLYPHS
from psprofiledirs.runtime.detect import detect_architecture, detect_machine_name, detect_platform
from psprofiledirs.state.paths import (
    profile_name_table,
    resolve_profile_root,
    resolve_terminal_name,
)
from psprofiledirs.state.settings import color_enabled, load_settings


class PathsTests(unittest.TestCase):
    def test_root_override_wins(self):
        env = {"PSPROFILEDIRS_ROOT": "/env/root"}
        self.assertEqual(resolve_profile_root("/cli/root", env), Path("/cli/root"))
        self.assertEqual(resolve_profile_root(None, env), Path("/env/root"))

    def test_default_root_follows_xdg(self):
        with patch("psprofiledirs.state.paths.platform.system", return_value="Linux"):
            root = resolve_profile_root(None, {"XDG_CONFIG_HOME": "/xdg"})
        self.assertEqual(root, Path("/xdg/powershell"))

    def test_terminal_name_from_term_program(self):
        self.assertEqual(resolve_terminal_name(None, {"TERM_PROGRAM": "vscode"}), "Microsoft.VSCode")
        self.assertIsNone(resolve_terminal_name(None, {"TERM_PROGRAM": "xterm"}))
        self.assertEqual(resolve_terminal_name("Custom", {}), "Custom")

    def test_profile_name_table(self):
        table = profile_name_table("Microsoft.PowerShell")
        self.assertEqual(table[ProfileKind.USER], "profile")
        self.assertEqual(table[ProfileKind.HOST], "Microsoft.PowerShell_profile")
        self.assertIsNone(table[ProfileKind.TERMINAL])

    def test_load_settings(self):
        args = SimpleNamespace(root="/r", host_name="Host", terminal_name=None, ascii=True, no_color=True)
        settings = load_settings(args, environ={})
        self.assertEqual(settings.root, Path("/r"))
        self.assertEqual(settings.profile_names[ProfileKind.HOST], "Host_profile")
        self.assertIs(settings.glyphs, ASCII_GLYPHS)
        self.assertFalse(settings.color)

    def test_color_respects_no_color(self):
        tty = SimpleNamespace(isatty=lambda: True)
        self.assertTrue(color_enabled(stream=tty, environ={}))
        self.assertFalse(color_enabled(stream=tty, environ={"NO_COLOR": "1"}))
        self.assertFalse(color_enabled(no_color=True, stream=tty, environ={}))


class DetectTests(unittest.TestCase):
    def test_architecture_names(self):
        with patch("psprofiledirs.runtime.detect.platform.machine", return_value="x86_64"):
            self.assertEqual(detect_architecture(), "X64")
        with patch("psprofiledirs.runtime.detect.platform.machine", return_value="aarch64"):
            self.assertEqual(detect_architecture(), "Arm64")

    def test_platform_names(self):
        with patch("psprofiledirs.runtime.detect.platform.system", return_value="Darwin"):
            self.assertEqual(detect_platform(), "MacOS")

    def test_machine_name_is_short(self):
        with patch("psprofiledirs.runtime.detect.platform.node", return_value="box1.example.org"):
            self.assertEqual(detect_machine_name(), "box1")


if __name__ == "__main__":
    unittest.main()
