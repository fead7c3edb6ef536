"""Registry for terminal adapters, keyed by platform."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from claude_gh.worktree.errors import LaunchFailedError, UnsupportedPlatformError

from .apple_terminal import AppleTerminal
from .base import Terminal  # noqa: TC001
from .gnome import GnomeTerminal
from .konsole import Konsole
from .windows_terminal import WindowsTerminal
from .xfce import XfceTerminal
from .xterm import XTerm

if TYPE_CHECKING:
    from collections.abc import Callable

# Linux terminals in preference order; xterm is the universal fallback
_LINUX_TERMINALS: list[type[Terminal]] = [
    GnomeTerminal,
    Konsole,
    XfceTerminal,
    XTerm,
]


def get_linux_terminals() -> list[Terminal]:
    """Get instances of the Linux terminals in preference order."""
    return [terminal_cls() for terminal_cls in _LINUX_TERMINALS]


def select_terminal(
    platform: str,
    which: Callable[[str], str | None] = shutil.which,
) -> Terminal:
    """Pick the terminal to launch for *platform* (a ``sys.platform`` value).

    Raises:
        UnsupportedPlatformError: for platforms without a launcher.
        LaunchFailedError: on Linux when no known terminal is installed.

    """
    if platform == "win32":
        return WindowsTerminal()
    if platform == "darwin":
        return AppleTerminal()
    if platform.startswith("linux"):
        terminals = get_linux_terminals()
        for terminal in terminals:
            if terminal.is_available(which):
                return terminal
        tried = ", ".join(t.executable for t in terminals)
        msg = f"no supported terminal emulator found (tried: {tried})"
        raise LaunchFailedError(msg)
    raise UnsupportedPlatformError(platform)
