"""Windows Terminal adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Terminal

if TYPE_CHECKING:
    from pathlib import Path


class WindowsTerminal(Terminal):
    """Windows Terminal (``wt.exe``)."""

    name = "windows-terminal"
    executable = "wt"

    def build_command(self, path: Path, command: str) -> list[str]:
        """Open a tab in *path* with a ``cmd`` that stays open after *command*."""
        return ["wt", "-d", str(path), "cmd", "/k", command]
