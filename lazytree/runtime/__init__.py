"""Host runtime: config, logging, terminal session, and intent draining."""

from __future__ import annotations

from .app import Application, InputLine, create_application
from .loop import run_app

__all__ = [
    "Application",
    "InputLine",
    "create_application",
    "run_app",
]
