"""Two-state confirmation gate for destructive operations.

``Idle`` lets key handling through. ``AwaitingConfirmation`` swallows every
key except the confirm and cancel keys, which both return the gate to
``Idle``. Executing the operation never re-arms the gate, whatever its
outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .events import CommandQueue, DeleteFile, OpenPopup, PendingOperation
from .file_ops import FileOperations
from .input import ENTER, ESC, KeyEvent

logger = logging.getLogger(__name__)

CONFIRM_COMBOS = frozenset({ENTER, "y"})
CANCEL_COMBOS = frozenset({ESC, "n", "q"})


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class AwaitingConfirmation:
    operation: PendingOperation


GateState = Idle | AwaitingConfirmation


@dataclass(frozen=True)
class GateResult:
    """What the gate did with one key event."""

    consumed: bool
    executed: bool = False
    error: OSError | None = None

IDLE = Idle()


def execute_operation(operation: PendingOperation, executor: FileOperations) -> OSError | None:
    """Run ``operation`` against ``executor`` and return its error, if any."""
    if isinstance(operation, DeleteFile):
        return executor.delete(operation.path)
    raise TypeError(f"unsupported pending operation: {operation!r}")


class PendingOperationGate:
    """Hold at most one destructive operation until it is confirmed or cancelled."""

    def __init__(self, queue: CommandQueue) -> None:
        self.queue = queue
        self.state: GateState = IDLE

    @property
    def awaiting(self) -> bool:
        return isinstance(self.state, AwaitingConfirmation)

    def request(self, operation: PendingOperation) -> bool:
        """Arm the gate with ``operation`` and ask the host for a confirmation popup.

        Returns ``False`` without side effects when an operation is already
        pending.
        """
        if self.awaiting:
            return False
        self.state = AwaitingConfirmation(operation)
        self.queue.add(OpenPopup(operation))
        logger.debug("awaiting confirmation for %s", operation)
        return True

    def cancel(self) -> None:
        if self.awaiting:
            logger.debug("cancelled %s", self.state.operation)
        self.state = IDLE

    def confirm(self, executor: FileOperations) -> OSError | None:
        """Return to ``Idle`` and execute the pending operation.

        The gate is already ``Idle`` when the executor runs, so a failure is
        only reported through the returned error.
        """
        state = self.state
        self.state = IDLE
        if not isinstance(state, AwaitingConfirmation):
            return None
        logger.info("confirmed %s", state.operation)
        return execute_operation(state.operation, executor)

    def handle_key(self, event: KeyEvent, executor: FileOperations) -> GateResult:
        """Consume ``event`` while awaiting confirmation.

        ``consumed`` is ``False`` only when the gate is idle and normal key
        handling should proceed.
        """
        if not self.awaiting:
            return GateResult(consumed=False)
        combo = event.combo
        if combo in CONFIRM_COMBOS:
            return GateResult(consumed=True, executed=True, error=self.confirm(executor))
        if combo in CANCEL_COMBOS:
            self.cancel()
        return GateResult(consumed=True)
