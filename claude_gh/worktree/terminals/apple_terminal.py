"""macOS Terminal.app adapter."""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

from .base import Terminal

if TYPE_CHECKING:
    from pathlib import Path


def _escape_applescript(s: str) -> str:
    """Escape string for AppleScript double-quoted string."""
    return s.replace("\\", "\\\\").replace('"', '\\"')


class AppleTerminal(Terminal):
    """macOS Terminal.app - the default macOS terminal."""

    name = "terminal"
    executable = "osascript"

    def build_command(self, path: Path, command: str) -> list[str]:
        """Drive Terminal.app through AppleScript.

        Note: Terminal.app doesn't support tab creation via AppleScript without
        System Events accessibility permissions, so we create a new window instead.
        """
        shell_cmd = _escape_applescript(f"cd {shlex.quote(str(path))} && {command}")
        applescript = f"""
            tell application "Terminal"
                do script "{shell_cmd}"
                activate
            end tell
        """
        return ["osascript", "-e", applescript]
