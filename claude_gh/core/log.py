"""Logging setup for claude-gh."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .utils import err_console


def setup_rich_logging(log_level: str = "warning", *, console: Console | None = None) -> None:
    """Configure logging to use Rich for consistent, pretty output.

    Diagnostics go to stderr so they never interleave with the output of
    git or the package managers on stdout.

    Args:
        log_level: Logging level (debug, info, warning, error).
        console: Optional Rich console to use (defaults to the stderr console).

    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    handler = RichHandler(
        console=console or err_console,
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
