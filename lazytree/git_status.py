"""Git status snapshot collection and per-path status hints.

A snapshot maps absolute paths to raw porcelain ``XY`` codes. Hints are
derived from a snapshot on every render and never stored.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

STATUS_UNTRACKED = "untracked"
STATUS_WORKTREE_MODIFIED = "worktree_modified"
STATUS_INDEX_MODIFIED = "index_modified"
STATUS_CLEAN = "clean"

GitStatusSnapshot = dict[Path, str]


def _resolve_repo_root(path: Path, timeout_seconds: float) -> Path | None:
    try:
        proc = subprocess.run(
            ["git", "-C", str(path), "rev-parse", "--show-toplevel"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if proc.returncode != 0:
        return None
    top = proc.stdout.strip()
    if not top:
        return None
    return Path(top).resolve()


def _run_git(repo_root: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(repo_root), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError):
        return None


def iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    """Split ``git status --porcelain=v1 -z`` output into ``(XY, path)`` pairs."""
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        records.append((status, token[3:]))

        # Renames and copies carry the source path as an extra token.
        if "R" in status or "C" in status:
            index += 1

    return records


def collect_git_status_snapshot(tree_root: Path, timeout_seconds: float = 0.5) -> GitStatusSnapshot | None:
    """Return a status snapshot for paths under ``tree_root``.

    ``None`` means no provider is available: not inside a repository, git is
    missing, or the status call failed.
    """
    tree_root = tree_root.resolve()
    repo_root = _resolve_repo_root(tree_root, timeout_seconds)
    if repo_root is None:
        return None

    status_proc = _run_git(
        repo_root,
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
        timeout_seconds,
    )
    if status_proc is None or status_proc.returncode != 0:
        logger.debug("git status unavailable for %s", repo_root)
        return None

    snapshot: GitStatusSnapshot = {}
    for status, rel_path in iter_porcelain_records(status_proc.stdout):
        if not rel_path or status == "!!":
            continue
        target = (repo_root / rel_path.rstrip("/")).resolve()
        if not target.is_relative_to(tree_root):
            continue
        snapshot[target] = status
    return snapshot


def hint_for_code(code: str) -> str:
    """Map one porcelain ``XY`` code to a display hint.

    Precedence: untracked, then worktree modification, then index
    modification or addition.
    """
    if code == "??":
        return STATUS_UNTRACKED
    index_status = code[:1]
    worktree_status = code[1:2]
    if worktree_status == "M":
        return STATUS_WORKTREE_MODIFIED
    if index_status in {"M", "A"}:
        return STATUS_INDEX_MODIFIED
    return STATUS_CLEAN


def status_hint_for(path: Path, snapshot: GitStatusSnapshot | None) -> str:
    """Return the display hint for ``path``; everything is clean without a snapshot."""
    if not snapshot:
        return STATUS_CLEAN
    code = snapshot.get(path)
    if code is None:
        return STATUS_CLEAN
    return hint_for_code(code)
