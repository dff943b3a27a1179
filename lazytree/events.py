"""Outbound intents and the FIFO command queue drained by the host.

The tree core only ever appends to the queue. Collaborating panes (preview,
input line, popups) react when the host drains it.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DeleteFile:
    """Destructive delete of one file or directory, pending confirmation."""

    path: Path


PendingOperation = DeleteFile


@dataclass(frozen=True)
class RunCommand:
    to: Path


@dataclass(frozen=True)
class SearchFiles:
    pass


@dataclass(frozen=True)
class NewFile:
    at: Path


@dataclass(frozen=True)
class NewDir:
    at: Path


InputOperation = RunCommand | SearchFiles | NewFile | NewDir


@dataclass(frozen=True)
class OpenFile:
    path: Path


@dataclass(frozen=True)
class OpenInput:
    operation: InputOperation


@dataclass(frozen=True)
class OpenPopup:
    operation: PendingOperation


@dataclass(frozen=True)
class PreviewFile:
    path: Path


@dataclass(frozen=True)
class TogglePreviewMode:
    pass


AppEvent = OpenFile | OpenInput | OpenPopup | PreviewFile | TogglePreviewMode


class CommandQueue:
    """Append-only FIFO of ``AppEvent`` intents.

    Adding never fails and never deduplicates; consecutive identical
    ``PreviewFile`` intents are kept for the host to coalesce.
    """

    def __init__(self) -> None:
        self._events: deque[AppEvent] = deque()

    def add(self, event: AppEvent) -> None:
        self._events.append(event)

    def pop(self) -> AppEvent | None:
        """Remove and return the oldest intent, or ``None`` when empty."""
        if not self._events:
            return None
        return self._events.popleft()

    def drain(self) -> list[AppEvent]:
        """Remove and return every queued intent in arrival order."""
        drained = list(self._events)
        self._events.clear()
        return drained

    def contains(self, event: AppEvent) -> bool:
        return event in self._events

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[AppEvent]:
        return iter(list(self._events))


__all__ = [
    "DeleteFile",
    "PendingOperation",
    "RunCommand",
    "SearchFiles",
    "NewFile",
    "NewDir",
    "InputOperation",
    "OpenFile",
    "OpenInput",
    "OpenPopup",
    "PreviewFile",
    "TogglePreviewMode",
    "AppEvent",
    "CommandQueue",
]
