"""Plain-text preview of the selected path for the right-hand column."""

from __future__ import annotations

import os
from pathlib import Path

PREVIEW_MAX_BYTES = 64 * 1024


def read_text(path: Path, max_bytes: int = PREVIEW_MAX_BYTES) -> str:
    """Read up to ``max_bytes`` of ``path`` trying common encodings in order."""
    with path.open("rb") as handle:
        data = handle.read(max_bytes)
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")


def _sanitize(line: str) -> str:
    return "".join(ch if ch.isprintable() else " " for ch in line.expandtabs(4))


def build_preview_lines(path: Path | None, max_lines: int) -> list[str]:
    """Return up to ``max_lines`` printable preview lines for ``path``.

    Directories list their entry names; unreadable paths produce a single
    message line.
    """
    if path is None or max_lines <= 0:
        return []
    try:
        if path.is_dir():
            names = sorted(os.listdir(path))
            return [f"{name}/" if (path / name).is_dir() else name for name in names][:max_lines]
        text = read_text(path)
    except OSError as exc:
        return [f"<cannot preview: {exc.strerror or exc}>"]
    if "\0" in text:
        return ["<binary file>"]
    return [_sanitize(line) for line in text.splitlines()[:max_lines]]
