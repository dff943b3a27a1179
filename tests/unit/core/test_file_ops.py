"""Tests for the filesystem-backed operation executor."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazytree.file_ops import FileOperations


class FileOperationsTests(unittest.TestCase):
    def test_create_and_delete_file_and_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            ops = FileOperations()

            self.assertIsNone(ops.create_file(root / "new.txt"))
            self.assertIsNone(ops.create_dir(root / "pkg" / "sub"))
            (root / "pkg" / "sub" / "x.txt").write_text("x", encoding="utf-8")

            self.assertIsNone(ops.delete(root / "new.txt"))
            self.assertIsNone(ops.delete(root / "pkg"))
            self.assertEqual(list(root.iterdir()), [])

    def test_errors_are_returned_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            ops = FileOperations()
            (root / "exists.txt").write_text("", encoding="utf-8")

            self.assertIsInstance(ops.create_file(root / "exists.txt"), FileExistsError)
            self.assertIsInstance(ops.create_dir(root / "exists.txt"), FileExistsError)
            self.assertIsInstance(ops.delete(root / "missing.txt"), FileNotFoundError)


if __name__ == "__main__":
    unittest.main()
