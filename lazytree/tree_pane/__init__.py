"""Tree pane: selection state, placement rule, key dispatch, and row rendering."""

from __future__ import annotations

from .navigation import SelectionPath, TreeSelection
from .pane import JUMP_AMOUNT, FileTreePane
from .placement import new_entry_parent
from .rendering import FILTERED_BANNER, TreeRow, build_tree_rows, format_tree_lines, format_tree_row

__all__ = [
    "SelectionPath",
    "TreeSelection",
    "FileTreePane",
    "JUMP_AMOUNT",
    "new_entry_parent",
    "FILTERED_BANNER",
    "TreeRow",
    "build_tree_rows",
    "format_tree_row",
    "format_tree_lines",
]
