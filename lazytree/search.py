"""File-name search used to build filtered tree views."""

from __future__ import annotations

import os
from pathlib import Path

SEARCH_MATCH_LIMIT = 2_000


def find_matching_paths(
    root: Path,
    query: str,
    show_hidden: bool = False,
    limit: int = SEARCH_MATCH_LIMIT,
) -> list[Path]:
    """Return paths under ``root`` whose name contains ``query`` (case-insensitive).

    Both files and directories match. An empty query matches nothing.
    """
    folded_query = query.strip().casefold()
    if not folded_query:
        return []
    root = root.resolve()
    matches: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        base = Path(dirpath)
        if not show_hidden:
            dirnames[:] = [name for name in dirnames if not name.startswith(".")]
            filenames = [name for name in filenames if not name.startswith(".")]
        dirnames.sort()
        for name in sorted([*dirnames, *filenames]):
            if folded_query in name.casefold():
                matches.append(base / name)
                if len(matches) >= limit:
                    return matches
    return matches
