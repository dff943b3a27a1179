"""Whole-tree snapshots with atomic full and filtered rebuilds."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from .fs import build_file_tree
from .types import DirectoryNode, TreeNode

logger = logging.getLogger(__name__)


def nested_child(root: DirectoryNode, selection: Sequence[int]) -> TreeNode | None:
    """Return the node reached by descending ``selection`` indices from ``root``.

    An empty selection or one indexing past a node's arity resolves to ``None``.
    """
    if not selection:
        return None
    node: TreeNode = root
    for index in selection:
        if not isinstance(node, DirectoryNode) or not 0 <= index < len(node.children):
            return None
        node = node.children[index]
    return node


class FileTreeModel:
    """Own the current root node of one filesystem subtree.

    The tree is never edited node by node. ``refresh`` and ``only_include``
    build a complete new tree and swap it in only after the build succeeded,
    so a failed rebuild leaves the previous snapshot untouched.
    """

    def __init__(self, root_path: Path, show_hidden: bool = False) -> None:
        """Scan ``root_path`` fully; raises ``OSError`` when it is unreadable."""
        self.root_path = Path(root_path).resolve()
        self.show_hidden = show_hidden
        self.root: DirectoryNode = build_file_tree(self.root_path, show_hidden)
        self.only_included = False

    def refresh(self) -> None:
        """Rebuild the full tree, discarding any active filter."""
        root = build_file_tree(self.root_path, self.show_hidden)
        self.root = root
        self.only_included = False
        logger.debug("refreshed tree at %s", self.root_path)

    def only_include(self, include: Iterable[Path]) -> None:
        """Rebuild keeping only ``include`` entries and their ancestors."""
        include = list(include)
        root = build_file_tree(self.root_path, self.show_hidden, include=include)
        self.root = root
        self.only_included = True
        logger.debug("filtered tree at %s to %d paths", self.root_path, len(include))

    def is_empty(self) -> bool:
        return not self.root.children

    def nested_child(self, selection: Sequence[int]) -> TreeNode | None:
        """Return the node reached by descending ``selection`` indices, if any."""
        return nested_child(self.root, selection)
