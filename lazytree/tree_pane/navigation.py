"""Selection and expansion state for the navigable tree.

The selected node is addressed positionally by a Selection Path (sibling
indices from the root). Expanded directories are tracked by their filesystem
path so toggles survive tree rebuilds wherever the directory still exists.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..file_tree_model import DirectoryNode, TreeNode, nested_child

logger = logging.getLogger(__name__)

SelectionPath = tuple[int, ...]


class TreeSelection:
    """Selected Selection Path plus the Expansion Set, independent of any tree."""

    def __init__(self) -> None:
        self.selected: SelectionPath = ()
        self.expanded: set[Path] = set()

    def visible(self, root: DirectoryNode) -> list[SelectionPath]:
        """Return Selection Paths of visible nodes in pre-order.

        Children of collapsed directories are not visible. Expansion entries
        for directories missing from ``root`` are simply never reached.
        """
        out: list[SelectionPath] = []

        def walk(directory: DirectoryNode, prefix: SelectionPath) -> None:
            for index, child in enumerate(directory.children):
                path = (*prefix, index)
                out.append(path)
                if isinstance(child, DirectoryNode) and child.path in self.expanded:
                    walk(child, path)

        walk(root, ())
        return out

    def resolve(self, root: DirectoryNode, path: SelectionPath | None = None) -> TreeNode | None:
        """Look up ``path`` (default: the selection) against the live tree."""
        return nested_child(root, self.selected if path is None else path)

    def select_first(self, root: DirectoryNode) -> None:
        self.selected = (0,) if root.children else ()

    def select_last(self, root: DirectoryNode) -> None:
        visible = self.visible(root)
        self.selected = visible[-1] if visible else ()

    def move_down(self, root: DirectoryNode, amount: int = 1) -> None:
        """Advance ``amount`` visible rows, clamping at the last one."""
        self._move(root, max(0, amount))

    def move_up(self, root: DirectoryNode, amount: int = 1) -> None:
        """Retreat ``amount`` visible rows, clamping at the first one."""
        self._move(root, -max(0, amount))

    def _move(self, root: DirectoryNode, delta: int) -> None:
        visible = self.visible(root)
        if not visible:
            self.selected = ()
            return
        try:
            current = visible.index(self.selected)
        except ValueError:
            self.selected = visible[0]
            return
        target = max(0, min(len(visible) - 1, current + delta))
        self.selected = visible[target]

    def is_expanded(self, root: DirectoryNode, path: SelectionPath | None = None) -> bool:
        node = self.resolve(root, path)
        return isinstance(node, DirectoryNode) and node.path in self.expanded

    def selected_is_open(self, root: DirectoryNode) -> bool:
        """Return whether the selected node is an expanded directory.

        A read-only query: the Expansion Set is left exactly as found.
        """
        return self.is_expanded(root)

    def toggle_expand(self, root: DirectoryNode, path: SelectionPath | None = None) -> bool:
        """Flip expansion of the directory at ``path``; no-op for files.

        Returns ``True`` when the Expansion Set changed.
        """
        node = self.resolve(root, path)
        if not isinstance(node, DirectoryNode):
            return False
        if node.path in self.expanded:
            self.expanded.discard(node.path)
        else:
            self.expanded.add(node.path)
        return True

    def opened_paths(self, root: DirectoryNode) -> list[SelectionPath]:
        """Return Selection Paths of expanded directories reachable in ``root``."""
        opened: list[SelectionPath] = []

        def walk(directory: DirectoryNode, prefix: SelectionPath) -> None:
            for index, child in enumerate(directory.children):
                if isinstance(child, DirectoryNode) and child.path in self.expanded:
                    path = (*prefix, index)
                    opened.append(path)
                    walk(child, path)

        walk(root, ())
        return opened

    def reconcile(self, root: DirectoryNode) -> bool:
        """Re-validate the selection after ``root`` replaced the previous tree.

        Resets to the first node when the selection no longer resolves or sits
        inside a collapsed directory, and returns ``True`` in that case.
        Expansion entries are kept as they are.
        """
        if self.resolve(root) is not None and self.selected in self.visible(root):
            return False
        logger.debug("selection %s is no longer visible; selecting first", self.selected)
        self.select_first(root)
        return True
