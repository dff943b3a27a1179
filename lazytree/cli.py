"""Command-line front door for lazytree.

Parses CLI options, resolves the root directory, configures logging, and
dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .runtime import run_app
from .runtime.logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazytree",
        description="Browse a directory tree in the terminal and manage its files.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Root directory. Defaults to current directory.")
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        default=None,
        help="Show dot-files (overrides the saved preference).",
    )
    parser.add_argument("--no-git", action="store_true", help="Disable git status coloring.")
    parser.add_argument("--log-level", default=None, help="Log level for the log file (default: WARNING).")
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of the default location.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazytree on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("lazytree needs an interactive terminal.")

    configure_logging(args.log_level, Path(args.log_file) if args.log_file else None)
    try:
        run_app(path, show_hidden=args.show_hidden, git_status=False if args.no_git else None)
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc.strerror or exc}") from exc


if __name__ == "__main__":
    main()
