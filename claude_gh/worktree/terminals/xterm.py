"""xterm adapter."""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

from .base import Terminal, _get_user_shell, _keep_open

if TYPE_CHECKING:
    from pathlib import Path


class XTerm(Terminal):
    """xterm - available on nearly every X11 system."""

    name = "xterm"
    executable = "xterm"

    def build_command(self, path: Path, command: str) -> list[str]:
        """Compose a ``cd`` into the shell command; xterm has no working-directory flag."""
        shell = _get_user_shell()
        script = _keep_open(f"cd {shlex.quote(str(path))} && {command}", shell)
        return ["xterm", "-e", shell, "-c", script]
