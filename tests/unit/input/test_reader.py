"""Raw terminal byte decoding tests."""

from __future__ import annotations

import os
import unittest

from lazytree.input import BACKSPACE, CTRL, DOWN, ENTER, ESC, SHIFT, UP, KeyEvent
from lazytree.input import reader


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        self.addCleanup(os.close, self.read_fd)
        self.addCleanup(os.close, self.write_fd)
        self.addCleanup(reader._PENDING_BYTES.clear)

    def feed(self, data: bytes) -> None:
        os.write(self.write_fd, data)

    def test_timeout_without_input_returns_none(self) -> None:
        self.assertIsNone(reader.read_key(self.read_fd, timeout_ms=10))

    def test_single_escape_returns_esc(self) -> None:
        self.feed(b"\x1b")
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent(ESC))

    def test_arrow_sequences(self) -> None:
        self.feed(b"\x1b[A\x1b[B")
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent(UP))
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent(DOWN))

    def test_escape_does_not_swallow_following_key(self) -> None:
        self.feed(b"\x1bq")
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent(ESC))
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent("q"))

    def test_control_and_named_bytes(self) -> None:
        self.feed(b"\x0e\x10\r\x7f")
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20).combo, "CTRL+n")
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent("p", frozenset({CTRL})))
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent(ENTER))
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent(BACKSPACE))

    def test_upper_case_and_utf8_characters(self) -> None:
        self.feed("Né".encode("utf-8"))
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent("N", frozenset({SHIFT})))
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), KeyEvent("é"))


if __name__ == "__main__":
    unittest.main()
