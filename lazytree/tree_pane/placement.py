"""Parent-directory rule for new files and directories."""

from __future__ import annotations

from pathlib import Path

from ..file_tree_model import DirectoryNode
from .navigation import TreeSelection


def new_entry_parent(root: DirectoryNode, selection: TreeSelection) -> Path | None:
    """Return the directory a new entry should be created in.

    An expanded selected directory receives the entry as a child; anything
    else gets a sibling in its parent directory. ``None`` when nothing is
    selected, which also covers the root since it is never selectable.
    """
    node = selection.resolve(root)
    if node is None:
        return None
    if isinstance(node, DirectoryNode) and selection.selected_is_open(root):
        return node.path
    return node.path.parent
