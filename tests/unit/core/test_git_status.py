"""Tests for porcelain parsing and status-hint precedence."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from lazytree import git_status
from lazytree.git_status import (
    STATUS_CLEAN,
    STATUS_INDEX_MODIFIED,
    STATUS_UNTRACKED,
    STATUS_WORKTREE_MODIFIED,
    hint_for_code,
    iter_porcelain_records,
    status_hint_for,
)

ROOT = Path("/tmp/lazytree-status")


class StatusHintTests(unittest.TestCase):
    def test_precedence_untracked_worktree_index_clean(self) -> None:
        self.assertEqual(hint_for_code("??"), STATUS_UNTRACKED)
        self.assertEqual(hint_for_code(" M"), STATUS_WORKTREE_MODIFIED)
        self.assertEqual(hint_for_code("MM"), STATUS_WORKTREE_MODIFIED)
        self.assertEqual(hint_for_code("AM"), STATUS_WORKTREE_MODIFIED)
        self.assertEqual(hint_for_code("M "), STATUS_INDEX_MODIFIED)
        self.assertEqual(hint_for_code("A "), STATUS_INDEX_MODIFIED)
        self.assertEqual(hint_for_code(" D"), STATUS_CLEAN)
        self.assertEqual(hint_for_code("R "), STATUS_CLEAN)

    def test_missing_provider_maps_everything_to_clean(self) -> None:
        self.assertEqual(status_hint_for(ROOT / "a.txt", None), STATUS_CLEAN)
        self.assertEqual(status_hint_for(ROOT / "a.txt", {}), STATUS_CLEAN)

    def test_lookup_is_order_independent(self) -> None:
        snapshot = {ROOT / "a.txt": "??", ROOT / "b.txt": " M", ROOT / "c.txt": "A "}
        paths = [ROOT / "c.txt", ROOT / "a.txt", ROOT / "z.txt", ROOT / "b.txt"]
        forward = [status_hint_for(path, snapshot) for path in paths]
        backward = [status_hint_for(path, snapshot) for path in reversed(paths)]
        self.assertEqual(forward, list(reversed(backward)))
        self.assertEqual(forward, [STATUS_INDEX_MODIFIED, STATUS_UNTRACKED, STATUS_CLEAN, STATUS_WORKTREE_MODIFIED])


class PorcelainParsingTests(unittest.TestCase):
    def test_rename_source_token_is_skipped(self) -> None:
        output = "R  new.txt\0old.txt\0?? untracked/\0 M src/mod.py\0"
        self.assertEqual(
            iter_porcelain_records(output),
            [("R ", "new.txt"), ("??", "untracked/"), (" M", "src/mod.py")],
        )

    def test_snapshot_is_none_outside_a_repository(self) -> None:
        with mock.patch.object(git_status, "_resolve_repo_root", return_value=None):
            self.assertIsNone(git_status.collect_git_status_snapshot(ROOT))


if __name__ == "__main__":
    unittest.main()
