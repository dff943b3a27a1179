"""Domain datatypes for filesystem-backed file tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileNode:
    """Leaf node for a regular file (or anything that is not a directory)."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class DirectoryNode:
    """Directory node owning its ordered children."""

    path: Path
    children: tuple["TreeNode", ...] = ()

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)


TreeNode = DirectoryNode | FileNode


__all__ = [
    "FileNode",
    "DirectoryNode",
    "TreeNode",
]
