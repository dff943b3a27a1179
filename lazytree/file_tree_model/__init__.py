"""Domain model for filesystem file/directory trees.

This package contains non-UI tree primitives:
- file/directory node datatypes with nested children
- filesystem scanning and full/filtered tree builders
- the ``FileTreeModel`` snapshot owner with atomic rebuilds
"""

from __future__ import annotations

from .types import DirectoryNode, FileNode, TreeNode
from .fs import (
    DirectoryChild,
    build_file_tree,
    child_sort_key,
    iter_nodes,
    list_directory_children,
    scan_directory,
)
from .snapshot import FileTreeModel, nested_child

__all__ = [
    "DirectoryNode",
    "FileNode",
    "TreeNode",
    "DirectoryChild",
    "child_sort_key",
    "scan_directory",
    "list_directory_children",
    "build_file_tree",
    "iter_nodes",
    "FileTreeModel",
    "nested_child",
]
