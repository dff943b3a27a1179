"""Persistent JSON config helpers.

Stores hidden-file, preview, git-status and jump-size preferences.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_JUMP_AMOUNT = 3


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored to keep runtime behavior non-fatal when
    config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_bool(key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def _save_bool(key: str, value: bool) -> None:
    config = load_config()
    config[key] = bool(value)
    save_config(config)


def load_show_hidden() -> bool:
    return _load_bool("show_hidden", False)


def save_show_hidden(show_hidden: bool) -> None:
    _save_bool("show_hidden", show_hidden)


def load_preview_visible() -> bool:
    return _load_bool("preview_visible", True)


def save_preview_visible(preview_visible: bool) -> None:
    _save_bool("preview_visible", preview_visible)


def load_git_status_enabled() -> bool:
    return _load_bool("git_status", True)


def load_jump_amount() -> int:
    """Return the Ctrl-n/Ctrl-p jump size.

    Booleans, non-integers and values below 1 fall back to the default.
    """
    value = load_config().get("jump_amount")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_JUMP_AMOUNT
    return value
