"""File-name search tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazytree.search import find_matching_paths


class FindMatchingPathsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        for name in ("src/Report.py", "src/util.py", "reports/a.txt", ".hidden/report.md", "notes.txt"):
            target = self.root / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("", encoding="utf-8")

    def test_matches_files_and_directories_case_insensitively(self) -> None:
        matches = find_matching_paths(self.root, "REPORT")
        self.assertEqual(sorted(matches), sorted([self.root / "reports", self.root / "src" / "Report.py"]))

    def test_hidden_entries_need_show_hidden(self) -> None:
        matches = find_matching_paths(self.root, "report", show_hidden=True)
        self.assertIn(self.root / ".hidden" / "report.md", matches)

    def test_blank_query_matches_nothing(self) -> None:
        self.assertEqual(find_matching_paths(self.root, "   "), [])

    def test_limit_caps_result_count(self) -> None:
        self.assertEqual(len(find_matching_paths(self.root, ".", limit=2)), 2)


if __name__ == "__main__":
    unittest.main()
