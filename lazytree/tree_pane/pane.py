"""Tree pane: key handling over the tree model and selection state.

The pane translates logical key events into selection changes and outbound
intents on the command queue. It never draws and never touches the
filesystem except through whole-tree rebuilds.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..events import (
    CommandQueue,
    DeleteFile,
    NewDir,
    NewFile,
    OpenFile,
    OpenInput,
    PreviewFile,
    RunCommand,
    SearchFiles,
    TogglePreviewMode,
)
from ..file_tree_model import DirectoryNode, FileNode, FileTreeModel, TreeNode
from ..input import DOWN, ENTER, UP, InputEvent, KeyComboBinding, KeyComboRegistry, RefreshRequested
from ..pending import PendingOperationGate
from .navigation import TreeSelection
from .placement import new_entry_parent

JUMP_AMOUNT = 3


class FileTreePane:
    """Navigable file tree component bound to a command queue and a gate."""

    def __init__(
        self,
        root_path: Path,
        queue: CommandQueue,
        gate: PendingOperationGate,
        *,
        show_hidden: bool = False,
        jump_amount: int = JUMP_AMOUNT,
    ) -> None:
        """Scan ``root_path`` and select its first entry.

        Raises ``OSError`` when the root cannot be read.
        """
        self.model = FileTreeModel(root_path, show_hidden)
        self.selection = TreeSelection()
        self.queue = queue
        self.gate = gate
        self.focused = True
        self.jump_amount = max(1, jump_amount)
        self._registry = self._build_registry()

        self.selection.select_first(self.root)
        self._preview_selected()

    @property
    def root(self) -> DirectoryNode:
        return self.model.root

    @property
    def root_path(self) -> Path:
        return self.model.root_path

    @property
    def only_included(self) -> bool:
        return self.model.only_included

    def selected_node(self) -> TreeNode | None:
        return self.selection.resolve(self.root)

    def refresh(self) -> None:
        """Full rescan; on ``OSError`` the previous tree and selection stay."""
        self.model.refresh()
        self.selection.reconcile(self.root)

    def only_include(self, include: Iterable[Path]) -> None:
        """Show only ``include`` entries and their ancestors, then preview the selection."""
        self.model.only_include(include)
        self.selection.reconcile(self.root)
        self._preview_selected()

    def handle_event(self, event: InputEvent) -> bool:
        """Handle one input event; returns ``True`` when a binding consumed it."""
        if not self.focused:
            return False
        if isinstance(event, RefreshRequested):
            self.refresh()
            return True
        handled = self._registry.dispatch(event.combo)
        if handled is None:
            return False
        if handled:
            self._preview_selected()
        return True

    def _preview_selected(self) -> None:
        node = self.selected_node()
        if node is not None:
            self.queue.add(PreviewFile(node.path))

    def _build_registry(self) -> KeyComboRegistry:
        selection = self.selection

        def select_first() -> bool:
            selection.select_first(self.root)
            return True

        def select_last() -> bool:
            selection.select_last(self.root)
            return True

        def move_down() -> bool:
            selection.move_down(self.root)
            return True

        def move_up() -> bool:
            selection.move_up(self.root)
            return True

        def jump_down() -> bool:
            selection.move_down(self.root, self.jump_amount)
            return True

        def jump_up() -> bool:
            selection.move_up(self.root, self.jump_amount)
            return True

        def run_command() -> bool:
            node = self.selected_node()
            if node is not None:
                self.queue.add(OpenInput(RunCommand(to=node.path)))
            return True

        def delete_selected() -> bool:
            node = self.selected_node()
            if node is not None:
                self.gate.request(DeleteFile(node.path))
            return True

        def toggle_preview_mode() -> bool:
            self.queue.add(TogglePreviewMode())
            return True

        def search_files() -> bool:
            self.queue.add(OpenInput(SearchFiles()))
            return True

        def reset_filter() -> bool:
            self.refresh()
            return True

        def activate() -> bool:
            node = self.selected_node()
            if isinstance(node, DirectoryNode):
                selection.toggle_expand(self.root)
            elif isinstance(node, FileNode):
                self.queue.add(OpenFile(node.path))
            return True

        def new_entry(make_operation) -> bool:
            parent = new_entry_parent(self.root, selection)
            if parent is None:
                return False
            self.queue.add(OpenInput(make_operation(parent)))
            return True

        return KeyComboRegistry().register_bindings(
            KeyComboBinding(("g",), select_first),
            KeyComboBinding(("SHIFT+G",), select_last),
            KeyComboBinding(("j", DOWN), move_down),
            KeyComboBinding(("k", UP), move_up),
            KeyComboBinding(("CTRL+n",), jump_down),
            KeyComboBinding(("CTRL+p",), jump_up),
            KeyComboBinding(("e",), run_command),
            KeyComboBinding(("d",), delete_selected),
            KeyComboBinding(("t",), toggle_preview_mode),
            KeyComboBinding(("/",), search_files),
            KeyComboBinding(("\\",), reset_filter),
            KeyComboBinding((ENTER,), activate),
            KeyComboBinding(("n",), lambda: new_entry(lambda at: NewFile(at=at))),
            KeyComboBinding(("SHIFT+N",), lambda: new_entry(lambda at: NewDir(at=at))),
        )


__all__ = ["FileTreePane", "JUMP_AMOUNT"]
