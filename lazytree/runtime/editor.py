"""Open tree files in the user's editor.

The editor runs in the foreground with the TUI suspended, from the file's own
directory. Problems come back as status-line messages, never as exceptions.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

EDITOR_VARIABLES = ("VISUAL", "EDITOR")


def editor_command(environ: dict[str, str] | None = None) -> list[str]:
    """Return the editor argv from ``$VISUAL``, falling back to ``$EDITOR``."""
    environ = os.environ if environ is None else environ
    for variable in EDITOR_VARIABLES:
        value = environ.get(variable, "").strip()
        if value:
            return shlex.split(value)
    return []


def launch_editor(
    target: Path,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> str | None:
    """Edit ``target`` and return a message for the status line, if any.

    Files deleted since the last rescan are refused before the terminal
    leaves TUI mode. A non-zero editor exit is reported but the session
    carries on.
    """
    if not target.is_file():
        return f"Cannot open {target.name}: no longer a file"
    cmd = editor_command()
    if not cmd:
        return "Cannot open: set $VISUAL or $EDITOR"

    logger.info("opening %s with %s", target, cmd[0])
    disable_tui_mode()
    try:
        completed = subprocess.run([*cmd, target.name], cwd=target.parent, check=False)
    except OSError as exc:
        logger.warning("editor %s failed to start: %s", cmd[0], exc)
        return f"Failed to launch {cmd[0]}: {exc.strerror or exc}"
    finally:
        enable_tui_mode()
    if completed.returncode != 0:
        return f"{cmd[0]} exited with status {completed.returncode}"
    return None
