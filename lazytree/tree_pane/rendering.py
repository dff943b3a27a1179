"""Row data and ANSI formatting for the tree pane."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model import DirectoryNode
from ..git_status import (
    STATUS_CLEAN,
    STATUS_INDEX_MODIFIED,
    STATUS_UNTRACKED,
    STATUS_WORKTREE_MODIFIED,
    GitStatusSnapshot,
    status_hint_for,
)
from .navigation import SelectionPath, TreeSelection

FILTERED_BANNER = "Some results may be filtered out ('\\' to reset)"

RESET = "\033[0m"
SELECTED_STYLE = "\033[30;102m"
BANNER_STYLE = "\033[33m"
STATUS_COLORS = {
    STATUS_UNTRACKED: "\033[31m",
    STATUS_WORKTREE_MODIFIED: "\033[34m",
    STATUS_INDEX_MODIFIED: "\033[32m",
    STATUS_CLEAN: "",
}


@dataclass(frozen=True)
class TreeRow:
    """One visible tree row as handed to the rendering surface."""

    selection_path: SelectionPath
    path: Path
    depth: int
    is_dir: bool
    is_expanded: bool
    is_selected: bool
    status: str = STATUS_CLEAN

    @property
    def name(self) -> str:
        return self.path.name


def build_tree_rows(
    root: DirectoryNode,
    selection: TreeSelection,
    git_status: GitStatusSnapshot | None = None,
) -> list[TreeRow]:
    """Return visible rows in display order with status hints resolved."""
    rows: list[TreeRow] = []
    for selection_path in selection.visible(root):
        node = selection.resolve(root, selection_path)
        if node is None:
            continue
        is_dir = isinstance(node, DirectoryNode)
        rows.append(
            TreeRow(
                selection_path=selection_path,
                path=node.path,
                depth=len(selection_path) - 1,
                is_dir=is_dir,
                is_expanded=is_dir and node.path in selection.expanded,
                is_selected=selection_path == selection.selected,
                status=status_hint_for(node.path, git_status),
            )
        )
    return rows


def format_tree_row(row: TreeRow, width: int | None = None) -> str:
    """Render one row as ANSI-styled text, clipped to ``width`` columns."""
    indent = "  " * row.depth
    if row.is_dir:
        marker = "▼ " if row.is_expanded else "▶ "
        name = row.name + "/"
    else:
        marker = "  "
        name = row.name
    text = f"{indent}{marker}{name}"
    if width is not None:
        text = text[: max(0, width)].ljust(max(0, width))
    if row.is_selected:
        return f"{SELECTED_STYLE}{text}{RESET}"
    color = STATUS_COLORS.get(row.status, "")
    if not color:
        return text
    return f"{color}{text}{RESET}"


def format_tree_lines(
    rows: list[TreeRow],
    width: int,
    only_included: bool = False,
) -> list[str]:
    """Format every row, prefixed by the filter banner for filtered views."""
    lines: list[str] = []
    if only_included:
        lines.append(f"{BANNER_STYLE}{FILTERED_BANNER[:width].ljust(width)}{RESET}")
        lines.append(" " * width)
    lines.extend(format_tree_row(row, width) for row in rows)
    return lines
