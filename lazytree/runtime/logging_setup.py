"""Logging configuration owned by the CLI entry point.

The terminal belongs to the TUI, so records only ever go to a rotating log
file. Calling ``configure_logging`` again replaces the previous handler.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "lazytree.log"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 2

_HANDLER_TAG = "_lazytree_handler"


def _parse_level(level: str | None) -> int:
    if not level:
        return logging.WARNING
    parsed = logging.getLevelName(str(level).strip().upper())
    return parsed if isinstance(parsed, int) else logging.WARNING


def configure_logging(level: str | None = None, log_file: Path | None = None) -> Path | None:
    """Attach a rotating file handler to the ``lazytree`` logger.

    Returns the log path in use, or ``None`` when the file could not be
    opened (logging is then left disabled).
    """
    package_logger = logging.getLogger(APP_NAME)
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            package_logger.removeHandler(handler)
            handler.close()

    path = Path(log_file) if log_file is not None else DEFAULT_LOG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        null_handler = logging.NullHandler()
        setattr(null_handler, _HANDLER_TAG, True)
        package_logger.addHandler(null_handler)
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    setattr(handler, _HANDLER_TAG, True)
    package_logger.addHandler(handler)
    package_logger.setLevel(_parse_level(level))
    package_logger.propagate = False
    return path
