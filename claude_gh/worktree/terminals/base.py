"""Base class for terminal emulator adapters."""

from __future__ import annotations

import os
import shutil
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from claude_gh.worktree.errors import LaunchFailedError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from claude_gh.core.runner import CommandRunner


class Terminal(ABC):
    """Abstract base class for terminal emulator adapters."""

    # Display name for the terminal
    name: str

    # Program looked up on PATH
    executable: str

    def is_available(self, which: Callable[[str], str | None] = shutil.which) -> bool:
        """Check if this terminal is installed and on PATH."""
        return which(self.executable) is not None

    @abstractmethod
    def build_command(self, path: Path, command: str) -> list[str]:
        """Return the argv that opens a window in *path* running *command*."""

    def open_window(self, path: Path, command: str, runner: CommandRunner) -> None:
        """Open a new window in *path* running *command*, without waiting for it.

        Raises:
            LaunchFailedError: if the terminal process could not be started.

        """
        args = self.build_command(path, command)
        try:
            runner.spawn(args, cwd=path)
        except OSError as e:
            msg = f"could not start {self.name}: {e}"
            raise LaunchFailedError(msg) from e

    def __repr__(self) -> str:  # noqa: D105
        return f"<{self.__class__.__name__} {self.name!r}>"


def _get_user_shell() -> str:
    """Shell that keeps the window open once the assistant exits."""
    return os.environ.get("SHELL") or "bash"


def _keep_open(command: str, shell: str) -> str:
    """Run *command*, then drop into an interactive *shell*."""
    return f"{command}; exec {shell}"
