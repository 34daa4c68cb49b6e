import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from outliner.global_config import OUTLINE_FILE_ENV, default_outline_path
from outliner.infrastructure import now_local, now_or_utc


class TestDefaultOutlinePath(unittest.TestCase):
    def test_environment_override(self) -> None:
        with mock.patch.dict(os.environ, {OUTLINE_FILE_ENV: "~/notes/outline.json"}):
            self.assertEqual(default_outline_path(), Path.home() / "notes" / "outline.json")

    def test_default_location(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True), \
                mock.patch("outliner.global_config.Path.home", return_value=Path(self._tmp_home())):
            path = default_outline_path()
        self.assertEqual(path.name, "outline.json")
        self.assertEqual(path.parent.name, ".outliner")
        self.assertTrue(path.parent.is_dir())

    def _tmp_home(self) -> str:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        return tmp.name


class TestClock(unittest.TestCase):
    def test_local_time_is_aware(self) -> None:
        now = now_local()
        if now is not None:
            self.assertIsNotNone(now.tzinfo)

    def test_unavailable_local_time(self) -> None:
        with mock.patch("outliner.infrastructure.clock.datetime") as fake:
            fake.now.return_value.astimezone.side_effect = OSError("no zone")
            self.assertIsNone(now_local())

    def test_utc_fallback(self) -> None:
        with mock.patch("outliner.infrastructure.clock.now_local", return_value=None):
            self.assertIsNotNone(now_or_utc().tzinfo)


if __name__ == "__main__":
    unittest.main()
