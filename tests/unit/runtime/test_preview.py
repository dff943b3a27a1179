"""Preview column content tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazytree.runtime.preview import build_preview_lines


class BuildPreviewLinesTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def test_text_file_lines_are_capped_and_sanitized(self) -> None:
        target = self.root / "a.txt"
        target.write_text("one\n\ttwo\x07\nthree\n", encoding="utf-8")
        self.assertEqual(build_preview_lines(target, 2), ["one", "    two "])

    def test_directory_lists_entries(self) -> None:
        (self.root / "sub").mkdir()
        (self.root / "file.txt").write_text("", encoding="utf-8")
        self.assertEqual(build_preview_lines(self.root, 10), ["file.txt", "sub/"])

    def test_binary_and_missing_paths(self) -> None:
        binary = self.root / "blob.bin"
        binary.write_bytes(b"\x00\x01\x02")
        self.assertEqual(build_preview_lines(binary, 5), ["<binary file>"])
        self.assertTrue(build_preview_lines(self.root / "missing", 5)[0].startswith("<cannot preview"))
        self.assertEqual(build_preview_lines(None, 5), [])


if __name__ == "__main__":
    unittest.main()
