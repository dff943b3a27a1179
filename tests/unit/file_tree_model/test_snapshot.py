"""Tests for whole-tree snapshot replacement."""

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree.file_tree_model import FileNode, FileTreeModel, nested_child


class FileTreeModelTests(unittest.TestCase):
    def test_only_include_sets_flag_and_refresh_clears_it(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "test.txt").write_text("", encoding="utf-8")
            (root / "test2.txt").write_text("", encoding="utf-8")
            model = FileTreeModel(root)

            model.only_include([root / "test.txt"])
            self.assertTrue(model.only_included)
            self.assertEqual(len(model.root.children), 1)

            model.refresh()
            self.assertFalse(model.only_included)
            self.assertEqual(len(model.root.children), 2)

    def test_failed_refresh_keeps_previous_snapshot(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve() / "tree"
            root.mkdir()
            (root / "keep.txt").write_text("", encoding="utf-8")
            model = FileTreeModel(root)
            model.only_include([root / "keep.txt"])
            previous = model.root

            shutil.rmtree(root)
            with self.assertRaises(OSError):
                model.refresh()

            self.assertIs(model.root, previous)
            self.assertTrue(model.only_included)

    def test_failed_filtered_build_keeps_previous_snapshot(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("", encoding="utf-8")
            model = FileTreeModel(root)
            previous = model.root

            with mock.patch("lazytree.file_tree_model.snapshot.build_file_tree", side_effect=PermissionError("denied")):
                with self.assertRaises(OSError):
                    model.only_include([root / "a.txt"])

            self.assertIs(model.root, previous)
            self.assertFalse(model.only_included)

    def test_nested_child_resolves_and_rejects_out_of_range_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "dir").mkdir()
            (root / "dir" / "inner.txt").write_text("", encoding="utf-8")
            model = FileTreeModel(root)

            self.assertEqual(model.nested_child((0, 0)), FileNode(path=root / "dir" / "inner.txt"))
            self.assertIsNone(model.nested_child(()))
            self.assertIsNone(model.nested_child((1,)))
            self.assertIsNone(model.nested_child((0, 0, 0)))
            self.assertIsNone(nested_child(model.root, (0, 5)))

    def test_empty_root_is_a_valid_state(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            model = FileTreeModel(Path(tmp))
            self.assertTrue(model.is_empty())
            self.assertEqual(model.root_path, Path(tmp).resolve())


if __name__ == "__main__":
    unittest.main()
