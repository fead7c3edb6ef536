"""GNOME Terminal adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Terminal, _get_user_shell, _keep_open

if TYPE_CHECKING:
    from pathlib import Path


class GnomeTerminal(Terminal):
    """GNOME Terminal - the default terminal on GNOME desktops."""

    name = "gnome-terminal"
    executable = "gnome-terminal"

    def build_command(self, path: Path, command: str) -> list[str]:
        """Open a window in *path*; everything after ``--`` is run inside it."""
        shell = _get_user_shell()
        return [
            "gnome-terminal",
            f"--working-directory={path}",
            "--",
            shell,
            "-c",
            _keep_open(command, shell),
        ]
