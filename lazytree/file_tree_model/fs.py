"""Filesystem scanning and tree builders for the file-tree domain model."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .types import DirectoryNode, FileNode, TreeNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One directory-child record observed by a scan."""

    name: str
    path: Path
    is_dir: bool


def child_sort_key(child: DirectoryChild) -> tuple[bool, str]:
    """Sort directories before files, then by case-sensitive name."""
    return (not child.is_dir, child.name)


def scan_directory(directory: Path, show_hidden: bool) -> list[DirectoryChild]:
    """Return sorted children of ``directory``.

    Raises ``OSError`` when the directory itself cannot be scanned.
    """
    children: list[DirectoryChild] = []
    with os.scandir(directory) as entries:
        for child in entries:
            name = child.name
            if not show_hidden and name.startswith("."):
                continue
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            children.append(DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir))
    children.sort(key=child_sort_key)
    return children


def list_directory_children(
    directory: Path,
    show_hidden: bool,
) -> tuple[list[DirectoryChild], Exception | None]:
    """List sorted children, returning ``(children, scan_error)`` instead of raising."""
    try:
        return scan_directory(directory, show_hidden), None
    except OSError as exc:
        return [], exc


def _normalize_include(root: Path, include: Iterable[Path]) -> tuple[set[Path], set[Path]]:
    """Split allow-list into ``(matches, ancestors)`` under ``root``.

    Relative entries are taken relative to ``root``; entries outside the root
    are dropped.
    """
    matches: set[Path] = set()
    ancestors: set[Path] = set()
    for raw_path in include:
        candidate = Path(raw_path)
        if not candidate.is_absolute():
            candidate = root / candidate
        if not candidate.is_relative_to(root):
            try:
                candidate = candidate.resolve()
            except OSError:
                continue
            if not candidate.is_relative_to(root):
                continue
        if candidate == root:
            continue
        matches.add(candidate)
        parent = candidate.parent
        while parent != root and parent.is_relative_to(root):
            ancestors.add(parent)
            parent = parent.parent
    return matches, ancestors


def build_file_tree(
    root: Path,
    show_hidden: bool = False,
    include: Iterable[Path] | None = None,
) -> DirectoryNode:
    """Build a domain file-tree rooted at ``root``.

    Without ``include`` this is a full recursive scan. With ``include`` only
    exact matches and the ancestors of matches are kept; nothing matching
    yields a root without children.

    Raises ``OSError`` when ``root`` itself is unreadable. Unreadable
    subdirectories become childless directory nodes.
    """
    root = root.resolve()
    top_level = scan_directory(root, show_hidden)

    if include is None:
        keep = None
        descend = None
    else:
        keep, descend = _normalize_include(root, include)

    def build_children(listed: list[DirectoryChild]) -> tuple[TreeNode, ...]:
        nodes: list[TreeNode] = []
        for child in listed:
            if keep is not None and child.path not in keep and child.path not in descend:
                continue
            if not child.is_dir:
                nodes.append(FileNode(path=child.path))
                continue
            if descend is not None and child.path not in descend:
                nodes.append(DirectoryNode(path=child.path))
                continue
            grandchildren, scan_error = list_directory_children(child.path, show_hidden)
            if scan_error is not None:
                logger.debug("skipping unreadable directory %s: %s", child.path, scan_error)
            nodes.append(DirectoryNode(path=child.path, children=build_children(grandchildren)))
        return tuple(nodes)

    return DirectoryNode(path=root, children=build_children(top_level))


def iter_nodes(node: TreeNode) -> Iterable[TreeNode]:
    """Yield ``node`` and its descendants in pre-order."""
    yield node
    if isinstance(node, DirectoryNode):
        for child in node.children:
            yield from iter_nodes(child)


__all__ = [
    "DirectoryChild",
    "child_sort_key",
    "scan_directory",
    "list_directory_children",
    "build_file_tree",
    "iter_nodes",
]
