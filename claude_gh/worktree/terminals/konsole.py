"""KDE Konsole adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Terminal, _get_user_shell, _keep_open

if TYPE_CHECKING:
    from pathlib import Path


class Konsole(Terminal):
    """Konsole - the KDE terminal."""

    name = "konsole"
    executable = "konsole"

    def build_command(self, path: Path, command: str) -> list[str]:
        """Open a window with ``--workdir`` and run the command via ``-e``."""
        shell = _get_user_shell()
        return ["konsole", "--workdir", str(path), "-e", shell, "-c", _keep_open(command, shell)]
