"""Host application: drains tree intents and drives the collaborating panes.

The host owns everything the core only asks for: the preview column, the
input line used for names/queries/commands, the confirmation prompt, and the
status message where errors are shown.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..browser import FileBrowser
from ..events import (
    DeleteFile,
    InputOperation,
    NewDir,
    NewFile,
    OpenFile,
    OpenInput,
    OpenPopup,
    PendingOperation,
    PreviewFile,
    RunCommand,
    SearchFiles,
    TogglePreviewMode,
)
from ..file_ops import FileOperations
from ..git_status import GitStatusSnapshot, collect_git_status_snapshot
from ..input import BACKSPACE, ENTER, ESC, InputEvent, KeyEvent
from ..search import find_matching_paths
from ..tree_pane import JUMP_AMOUNT, build_tree_rows, format_tree_lines
from . import config
from .preview import build_preview_lines

logger = logging.getLogger(__name__)

PREVIEW_WIDTH_PERCENT = 60
HELP_TEXT = "j/k move  enter open  n/N new  d delete  e run  / search  \\ reset  t preview  q quit"
INPUT_PROMPTS = {
    NewFile: "New file: ",
    NewDir: "New directory: ",
    SearchFiles: "Search: ",
    RunCommand: "Run: ",
}


@dataclass
class InputLine:
    """Text being typed for one input operation."""

    operation: InputOperation
    text: str = ""

    @property
    def prompt(self) -> str:
        return INPUT_PROMPTS.get(type(self.operation), "> ")


class Application:
    """One interactive session over a root directory."""

    def __init__(
        self,
        root_path: Path,
        *,
        show_hidden: bool = False,
        jump_amount: int = JUMP_AMOUNT,
        preview_visible: bool = True,
        git_status_enabled: bool = True,
        executor: FileOperations | None = None,
        collect_git_status: Callable[[Path], GitStatusSnapshot | None] = collect_git_status_snapshot,
        open_file: Callable[[Path], str | None] | None = None,
        run_command: Callable[[str, Path], str | None] | None = None,
        persist_preferences: bool = False,
    ) -> None:
        self.browser = FileBrowser(
            root_path,
            executor=executor,
            show_hidden=show_hidden,
            jump_amount=jump_amount,
        )
        self.show_hidden = show_hidden
        self.preview_visible = preview_visible
        self.git_status_enabled = git_status_enabled
        self.collect_git_status = collect_git_status
        self.open_file = open_file
        self.run_command = run_command
        self.persist_preferences = persist_preferences
        self.preview_path: Path | None = None
        self.input_line: InputLine | None = None
        self.popup: PendingOperation | None = None
        self.message = ""
        self.should_quit = False
        self.tree_start = 0
        self.drain_events()

    @property
    def root_path(self) -> Path:
        return self.browser.tree.root_path

    def handle_event(self, event: InputEvent) -> None:
        """Process one input event to completion, then drain intents."""
        if self.input_line is not None and isinstance(event, KeyEvent):
            self._handle_input_key(event)
            self.drain_events()
            return
        if isinstance(event, KeyEvent) and not self.browser.gate.awaiting and event.combo in {"q", ESC}:
            self.should_quit = True
            return

        result = self.browser.dispatch(event)
        if result.error is not None:
            self.message = _describe_error(result.error)
        elif result.handled:
            self.message = ""
        if not self.browser.gate.awaiting:
            self.popup = None
        self.drain_events()
        self._ensure_preview_exists()

    def drain_events(self) -> None:
        """Consume every queued intent in order."""
        for event in self.browser.drain():
            if isinstance(event, PreviewFile):
                self.preview_path = event.path
            elif isinstance(event, TogglePreviewMode):
                self.preview_visible = not self.preview_visible
                if self.persist_preferences:
                    config.save_preview_visible(self.preview_visible)
            elif isinstance(event, OpenFile):
                self._open_file(event.path)
            elif isinstance(event, OpenInput):
                self.input_line = InputLine(event.operation)
            elif isinstance(event, OpenPopup):
                self.popup = event.operation

    def _open_file(self, path: Path) -> None:
        if self.open_file is None:
            self.message = f"No opener configured for {path.name}"
            return
        error = self.open_file(path)
        if error:
            self.message = error

    def _ensure_preview_exists(self) -> None:
        if self.preview_path is not None and not self.preview_path.exists():
            node = self.browser.tree.selected_node()
            self.preview_path = node.path if node is not None else None

    def _handle_input_key(self, event: KeyEvent) -> None:
        line = self.input_line
        if event.code == ESC:
            self.input_line = None
        elif event.code == ENTER:
            self.input_line = None
            self._submit_input(line.operation, line.text.strip())
        elif event.code == BACKSPACE:
            line.text = line.text[:-1]
        elif event.is_printable:
            line.text += event.code

    def _submit_input(self, operation: InputOperation, text: str) -> None:
        if not text:
            return
        executor = self.browser.executor
        if isinstance(operation, (NewFile, NewDir)):
            target = self._new_entry_target(operation.at, text)
            if target is None:
                self.message = f"Name must stay inside {self.root_path.name}/: {text}"
                return
            if isinstance(operation, NewFile):
                self._report(executor.create_file(target), f"Created {text}")
            else:
                self._report(executor.create_dir(target), f"Created {text}/")
            self._report(self.browser.refresh())
        elif isinstance(operation, SearchFiles):
            matches = find_matching_paths(self.root_path, text, show_hidden=self.show_hidden)
            self._report(self.browser.only_include(matches))
            if not matches:
                self.message = f"No matches for {text!r}"
        elif isinstance(operation, RunCommand):
            if self.run_command is None:
                self.message = "No command runner configured"
                return
            self.message = self.run_command(text, operation.to) or ""

    def _new_entry_target(self, parent: Path, name: str) -> Path | None:
        """Return where ``name`` would be created, or ``None`` if that escapes the root."""
        if Path(name).is_absolute():
            return None
        target = parent / name
        resolved = target.resolve()
        if resolved == self.root_path or not resolved.is_relative_to(self.root_path):
            return None
        return target

    def _report(self, error: OSError | None, success: str = "") -> None:
        if error is not None:
            self.message = _describe_error(error)
        elif success:
            self.message = success

    def status_line(self) -> str:
        if self.input_line is not None:
            return f"{self.input_line.prompt}{self.input_line.text}"
        if isinstance(self.popup, DeleteFile):
            return f"Delete {self.popup.path.name}? (y/enter confirm, n/esc cancel)"
        if self.message:
            return self.message
        return HELP_TEXT

    def render_frame(self, width: int, height: int) -> list[str]:
        """Compose one screen: tree column, optional preview column, status line."""
        width = max(1, width)
        body_height = max(1, height - 1)
        tree = self.browser.tree
        git_status = self.collect_git_status(tree.root_path) if self.git_status_enabled else None
        rows = build_tree_rows(tree.root, tree.selection, git_status)

        if self.preview_visible and width >= 20:
            preview_width = width * PREVIEW_WIDTH_PERCENT // 100
            left_width = width - preview_width - 3
        else:
            preview_width = 0
            left_width = width

        header_rows = 2 if tree.only_included else 0
        list_height = max(1, body_height - header_rows)
        selected_index = next((idx for idx, row in enumerate(rows) if row.is_selected), 0)
        if selected_index < self.tree_start:
            self.tree_start = selected_index
        elif selected_index >= self.tree_start + list_height:
            self.tree_start = selected_index - list_height + 1
        self.tree_start = max(0, min(self.tree_start, max(0, len(rows) - list_height)))

        visible_rows = rows[self.tree_start : self.tree_start + list_height]
        left = format_tree_lines(visible_rows, left_width, tree.only_included)
        if not rows:
            left.append("(no entries)"[:left_width].ljust(left_width))
        left = left[:body_height]
        left.extend(" " * left_width for _ in range(body_height - len(left)))

        if preview_width:
            right = build_preview_lines(self.preview_path, body_height)
            right.extend("" for _ in range(body_height - len(right)))
            body = [f"{lhs} │ {rhs[:preview_width]}" for lhs, rhs in zip(left, right)]
        else:
            body = left[:body_height]
        return [*body, self.status_line()[:width]]


def _describe_error(error: OSError) -> str:
    detail = error.strerror or str(error)
    if error.filename:
        return f"{detail}: {error.filename}"
    return detail


def create_application(root_path: Path, *, show_hidden: bool | None = None, git_status: bool | None = None, **kwargs) -> Application:
    """Build an ``Application`` with persisted preferences filling unset options."""
    return Application(
        root_path,
        show_hidden=config.load_show_hidden() if show_hidden is None else show_hidden,
        jump_amount=config.load_jump_amount(),
        preview_visible=config.load_preview_visible(),
        git_status_enabled=config.load_git_status_enabled() if git_status is None else git_status,
        persist_preferences=True,
        **kwargs,
    )
