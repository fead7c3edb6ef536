"""Terminal adapters for opening the assistant in a new window."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .base import Terminal
from .registry import get_linux_terminals, select_terminal

if TYPE_CHECKING:
    from collections.abc import Callable

    from claude_gh.core.runner import CommandRunner

__all__ = [
    "Terminal",
    "get_linux_terminals",
    "open_terminal_with_assistant",
    "select_terminal",
]

logger = logging.getLogger(__name__)


def open_terminal_with_assistant(
    path: Path,
    command: str,
    runner: CommandRunner,
    *,
    platform: str = sys.platform,
    which: Callable[[str], str | None] | None = None,
) -> Path:
    """Open a new terminal window in *path* running the assistant *command*.

    Fire and forget: returns as soon as the terminal process has started.

    Returns:
        The absolute worktree path.

    """
    abs_path = Path(path).resolve()
    terminal = select_terminal(platform) if which is None else select_terminal(platform, which)
    terminal.open_window(abs_path, command, runner)
    logger.info("Started %s in %s", terminal.name, abs_path)
    return abs_path
