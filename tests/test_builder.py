import tempfile
import unittest
from pathlib import Path

from psprofiledirs.core.errors import FilesystemError
from psprofiledirs.core.models import (
    PROFILE_KIND_ORDER,
    DimensionSettings,
    Edition,
    EnvironmentFacts,
    ProfileKind,
)
from psprofiledirs.profile.builder import build_profile_directories
from psprofiledirs.runtime.console import ListSink
from psprofiledirs.state.paths import profile_name_table
from psprofiledirs.state.settings import Settings


FACTS = EnvironmentFacts(architecture="X64", machine="box1", platform="Linux")
DIMS = DimensionSettings(platform=True, edition=True, edition_selector=Edition.ALL)


def make_settings(root, terminal=None):
    return Settings(
        root=Path(root),
        profile_names=profile_name_table("Microsoft.PowerShell", terminal),
        facts=FACTS,
    )


class BuilderTests(unittest.TestCase):
    def test_creates_roots_and_plan(self):
        with tempfile.TemporaryDirectory() as td:
            sink = ListSink()
            result = build_profile_directories(make_settings(td), PROFILE_KIND_ORDER, DIMS, sink=sink)

            # user + host roots, three conditional directories each; no terminal profile
            self.assertEqual(result.count, 8)
            for name in ("profile", "Microsoft.PowerShell_profile"):
                base = Path(td) / name
                self.assertTrue((base / "_Platform-Linux" / "_PSEdition-Core").is_dir())
                self.assertTrue((base / "_Platform-Linux" / "_PSEdition-Desktop").is_dir())
            self.assertFalse(any(p.name.startswith("None") for p in Path(td).iterdir()))
            self.assertEqual(len(sink.lines), 8)
            self.assertTrue(all(existed is False for _, existed in sink.lines))

    def test_second_run_is_idempotent(self):
        with tempfile.TemporaryDirectory() as td:
            settings = make_settings(td)
            build_profile_directories(settings, PROFILE_KIND_ORDER, DIMS)
            sink = ListSink()
            result = build_profile_directories(settings, PROFILE_KIND_ORDER, DIMS, sink=sink)
            self.assertEqual(result.count, 0)
            self.assertEqual(len(result.existing), 8)
            self.assertTrue(all(existed for _, existed in sink.lines))

    def test_terminal_profile_when_present(self):
        with tempfile.TemporaryDirectory() as td:
            settings = make_settings(td, terminal="Microsoft.VSCode")
            result = build_profile_directories(settings, [ProfileKind.TERMINAL], DimensionSettings())
            self.assertEqual(result.created, [Path(td) / "Microsoft.VSCode_profile"])

    def test_dry_run_creates_nothing_and_reports_same_paths(self):
        with tempfile.TemporaryDirectory() as td:
            settings = make_settings(td)
            sink = ListSink()
            dry = build_profile_directories(settings, PROFILE_KIND_ORDER, DIMS, dry_run=True, sink=sink)
            self.assertEqual(list(Path(td).iterdir()), [])
            self.assertEqual(len(sink.notes), dry.count)
            self.assertTrue(all(note.startswith("What if:") for note in sink.notes))

            real = build_profile_directories(settings, PROFILE_KIND_ORDER, DIMS)
            self.assertEqual(dry.created, real.created)

    def test_dry_run_never_asks(self):
        def confirm(description, target):
            raise AssertionError("confirmation asked during dry run")

        with tempfile.TemporaryDirectory() as td:
            result = build_profile_directories(
                make_settings(td), [ProfileKind.USER], DIMS, dry_run=True, confirm=confirm
            )
            self.assertEqual(result.count, 4)

    def test_denied_directory_skips_its_children(self):
        def confirm(description, target):
            return Path(target).name != "_Platform-Linux"

        with tempfile.TemporaryDirectory() as td:
            sink = ListSink()
            result = build_profile_directories(
                make_settings(td), [ProfileKind.USER], DIMS, confirm=confirm, sink=sink
            )
            self.assertEqual(result.created, [Path(td) / "profile"])
            self.assertEqual(len(result.skipped), 3)
            self.assertFalse((Path(td) / "profile" / "_Platform-Linux").exists())
            # the tree is still drawn in full
            self.assertEqual(len(sink.lines), 4)

    def test_denied_root_skips_whole_profile(self):
        with tempfile.TemporaryDirectory() as td:
            result = build_profile_directories(
                make_settings(td), [ProfileKind.USER], DIMS, confirm=lambda d, t: False
            )
            self.assertEqual(result.count, 0)
            self.assertEqual(len(result.skipped), 4)
            self.assertEqual(list(Path(td).iterdir()), [])

    def test_missing_configured_root_is_created_with_first_profile(self):
        with tempfile.TemporaryDirectory() as td:
            settings = make_settings(Path(td) / ".config" / "powershell")
            dry = build_profile_directories(settings, [ProfileKind.USER], DIMS, dry_run=True)
            self.assertEqual(list(Path(td).iterdir()), [])
            self.assertEqual(dry.count, 4)

            real = build_profile_directories(settings, [ProfileKind.USER], DIMS)
            self.assertEqual(real.created, dry.created)
            self.assertTrue((settings.root / "profile" / "_Platform-Linux" / "_PSEdition-Core").is_dir())

    def test_error_is_not_logged_when_raised(self):
        with self.assertNoLogs(level="ERROR"):
            FilesystemError("create", Path("/x"), "denied")

    def test_file_in_the_way_is_fatal(self):
        with tempfile.TemporaryDirectory() as td:
            (Path(td) / "profile").write_text("not a directory")
            with self.assertRaises(FilesystemError) as ctx:
                build_profile_directories(make_settings(td), [ProfileKind.USER], DIMS)
            self.assertEqual(ctx.exception.action, "create")
            self.assertEqual(ctx.exception.path, Path(td) / "profile")
            self.assertIn("profile", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
