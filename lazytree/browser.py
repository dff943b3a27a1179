"""Core controller: routes one input event through the gate, then the tree pane."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .events import AppEvent, CommandQueue
from .file_ops import FileOperations
from .input import InputEvent, KeyEvent
from .pending import PendingOperationGate
from .tree_pane import JUMP_AMOUNT, FileTreePane

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one dispatched event.

    ``error`` carries a failed file operation or rescan for the host to show.
    """

    handled: bool
    error: OSError | None = None


class FileBrowser:
    """Own the command queue, the pending-operation gate, and the tree pane.

    Events are processed one at a time to completion.
    """

    def __init__(
        self,
        root_path: Path,
        *,
        executor: FileOperations | None = None,
        show_hidden: bool = False,
        jump_amount: int = JUMP_AMOUNT,
    ) -> None:
        self.queue = CommandQueue()
        self.gate = PendingOperationGate(self.queue)
        self.executor = executor if executor is not None else FileOperations()
        self.tree = FileTreePane(
            root_path,
            self.queue,
            self.gate,
            show_hidden=show_hidden,
            jump_amount=jump_amount,
        )

    def dispatch(self, event: InputEvent) -> DispatchResult:
        """Process ``event``; the gate gets the first look at key events."""
        if isinstance(event, KeyEvent) and self.gate.awaiting:
            outcome = self.gate.handle_key(event, self.executor)
            if outcome.executed:
                refresh_error = self.refresh()
                return DispatchResult(True, outcome.error or refresh_error)
            return DispatchResult(True)
        try:
            handled = self.tree.handle_event(event)
        except OSError as exc:
            logger.warning("tree rescan failed: %s", exc)
            return DispatchResult(True, exc)
        return DispatchResult(handled)

    def refresh(self) -> OSError | None:
        """Rescan the tree, returning the error instead of raising."""
        try:
            self.tree.refresh()
        except OSError as exc:
            logger.warning("tree rescan failed: %s", exc)
            return exc
        return None

    def only_include(self, include: Iterable[Path]) -> OSError | None:
        try:
            self.tree.only_include(include)
        except OSError as exc:
            logger.warning("filtered rescan failed: %s", exc)
            return exc
        return None

    def drain(self) -> list[AppEvent]:
        return self.queue.drain()

