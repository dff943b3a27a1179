"""Logical key events delivered to the tree core.

Events are already decoded: a key code plus a modifier set. Printable keys
use the character itself as code; named keys use upper-case tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, field

CTRL = "CTRL"
SHIFT = "SHIFT"

ENTER = "ENTER"
ESC = "ESC"
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
TAB = "TAB"
BACKSPACE = "BACKSPACE"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded keypress."""

    code: str
    modifiers: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def char(cls, ch: str) -> KeyEvent:
        """Build the event a terminal produces for a typed character.

        Upper-case letters carry ``SHIFT`` the same way terminal backends
        report them.
        """
        if len(ch) == 1 and ch.isalpha() and ch.isupper():
            return cls(ch, frozenset({SHIFT}))
        return cls(ch)

    @classmethod
    def ctrl(cls, ch: str) -> KeyEvent:
        return cls(ch.lower(), frozenset({CTRL}))

    @property
    def combo(self) -> str:
        """Registry token such as ``"g"``, ``"SHIFT+G"`` or ``"CTRL+n"``."""
        return "+".join([*sorted(self.modifiers), self.code])

    @property
    def is_printable(self) -> bool:
        return len(self.code) == 1 and self.code.isprintable() and not (self.modifiers - {SHIFT})


@dataclass(frozen=True)
class RefreshRequested:
    """Lifecycle event asking the tree to rescan the filesystem."""


InputEvent = KeyEvent | RefreshRequested


__all__ = [
    "CTRL",
    "SHIFT",
    "ENTER",
    "ESC",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "TAB",
    "BACKSPACE",
    "KeyEvent",
    "RefreshRequested",
    "InputEvent",
]
