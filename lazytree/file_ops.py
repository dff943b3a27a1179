"""Filesystem mutations requested by confirmed or input-line operations.

Failures come back as ``OSError`` values for the host to display.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class FileOperations:
    """Default file-operation executor backed by the local filesystem."""

    def delete(self, path: Path) -> OSError | None:
        """Remove a file, symlink, or directory tree."""
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as exc:
            logger.warning("delete failed for %s: %s", path, exc)
            return exc
        logger.info("deleted %s", path)
        return None

    def create_file(self, path: Path) -> OSError | None:
        """Create an empty file; an existing path is an error."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=False)
        except OSError as exc:
            logger.warning("create file failed for %s: %s", path, exc)
            return exc
        logger.info("created file %s", path)
        return None

    def create_dir(self, path: Path) -> OSError | None:
        """Create a directory, including missing parents."""
        try:
            path.mkdir(parents=True, exist_ok=False)
        except OSError as exc:
            logger.warning("create directory failed for %s: %s", path, exc)
            return exc
        logger.info("created directory %s", path)
        return None
