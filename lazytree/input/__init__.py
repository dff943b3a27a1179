"""Input-layer public API: logical key events, registry, and decoding."""

from .keys import (
    BACKSPACE,
    CTRL,
    DOWN,
    ENTER,
    ESC,
    LEFT,
    RIGHT,
    SHIFT,
    TAB,
    UP,
    InputEvent,
    KeyEvent,
    RefreshRequested,
)
from .key_registry import KeyComboBinding, KeyComboRegistry

__all__ = [
    "BACKSPACE",
    "CTRL",
    "DOWN",
    "ENTER",
    "ESC",
    "LEFT",
    "RIGHT",
    "SHIFT",
    "TAB",
    "UP",
    "InputEvent",
    "KeyEvent",
    "RefreshRequested",
    "KeyComboBinding",
    "KeyComboRegistry",
]
