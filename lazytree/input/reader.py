"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``KeyEvent`` values.
"""

from __future__ import annotations

import os
import select

from .keys import BACKSPACE, DOWN, ENTER, ESC, LEFT, RIGHT, TAB, UP, KeyEvent

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CSI_KEYS = {
    b"A": UP,
    b"B": DOWN,
    b"C": RIGHT,
    b"D": LEFT,
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> bytes:
    lead = first[0]
    if lead >= 0xF0:
        missing = 3
    elif lead >= 0xE0:
        missing = 2
    elif lead >= 0xC0:
        missing = 1
    else:
        return first
    data = first
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data


def read_key(fd: int, timeout_ms: int | None = None) -> KeyEvent | None:
    """Read one key from ``fd``; ``None`` on timeout or end of input."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return None

        ch = os.read(fd, 1)
        if not ch:
            return None

    if ch in {b"\r", b"\n"}:
        return KeyEvent(ENTER)
    if ch == b"\t":
        return KeyEvent(TAB)
    if ch in {b"\x08", b"\x7f"}:
        return KeyEvent(BACKSPACE)
    if 1 <= ch[0] <= 26:
        return KeyEvent.ctrl(chr(ord("a") + ch[0] - 1))

    if ch != b"\x1b":
        return KeyEvent.char(_read_utf8_tail(fd, ch).decode("utf-8", errors="replace"))

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KeyEvent(ESC)
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return KeyEvent(ESC)
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KeyEvent(ESC)
    code = _CSI_KEYS.get(seq)
    if code is not None:
        return KeyEvent(code)
    return KeyEvent(ESC)
