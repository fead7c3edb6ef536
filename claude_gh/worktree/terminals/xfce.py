"""XFCE Terminal adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Terminal, _get_user_shell, _keep_open

if TYPE_CHECKING:
    from pathlib import Path


class XfceTerminal(Terminal):
    """xfce4-terminal - the XFCE terminal."""

    name = "xfce4-terminal"
    executable = "xfce4-terminal"

    def build_command(self, path: Path, command: str) -> list[str]:
        """Open a window in *path*; ``-x`` takes the rest of the argv as the command."""
        shell = _get_user_shell()
        return [
            "xfce4-terminal",
            f"--working-directory={path}",
            "-x",
            shell,
            "-c",
            _keep_open(command, shell),
        ]
