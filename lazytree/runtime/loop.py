"""Interactive terminal loop: render, read one key, dispatch, repeat."""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path

from ..input.reader import read_key
from .app import create_application
from .editor import launch_editor
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_app(root_path: Path, *, show_hidden: bool | None = None, git_status: bool | None = None) -> None:
    """Run the file browser on ``root_path`` until the user quits.

    Raises ``OSError`` when the root cannot be scanned at startup.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)

    app = create_application(
        root_path,
        show_hidden=show_hidden,
        git_status=git_status,
        open_file=lambda path: launch_editor(path, terminal.disable_tui_mode, terminal.enable_tui_mode),
    )
    logger.info("session started at %s", app.root_path)

    terminal.enable_tui_mode()
    try:
        while not app.should_quit:
            size = shutil.get_terminal_size((80, 24))
            terminal.write_frame(app.render_frame(size.columns, size.lines))
            key = read_key(stdin_fd)
            if key is None:
                break
            app.handle_event(key)
    finally:
        terminal.disable_tui_mode()
        logger.info("session ended")
