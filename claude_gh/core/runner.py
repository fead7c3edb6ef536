"""Process execution boundary.

All external programs (git, package managers, terminal emulators) are started
through a :class:`CommandRunner`, so the provisioning workflow can be driven
by a fake runner in tests.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Capability for starting external processes."""

    def run(self, args: Sequence[str], *, cwd: Path | None = None, quiet: bool = False) -> int:
        """Run a command to completion and return its exit status.

        Standard output and error are inherited unless *quiet* is set.
        Raises ``OSError`` if the program cannot be started.
        """
        ...

    def capture(self, args: Sequence[str], *, cwd: Path | None = None) -> tuple[int, str]:
        """Run a command to completion and return ``(exit_status, stdout)``."""
        ...

    def spawn(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        """Start a command without waiting for it.

        Raises ``OSError`` if the program cannot be started.
        """
        ...


class SubprocessRunner:
    """:class:`CommandRunner` backed by :mod:`subprocess`."""

    def run(self, args: Sequence[str], *, cwd: Path | None = None, quiet: bool = False) -> int:
        """Run a command, inheriting stdio unless *quiet*."""
        logger.debug("Running: %s (cwd=%s)", shlex.join(args), cwd or ".")
        stream = subprocess.DEVNULL if quiet else None
        result = subprocess.run(  # noqa: S603
            list(args),
            cwd=cwd,
            stdout=stream,
            stderr=stream,
            check=False,
        )
        logger.debug("Exit status %d: %s", result.returncode, args[0])
        return result.returncode

    def capture(self, args: Sequence[str], *, cwd: Path | None = None) -> tuple[int, str]:
        """Run a command and capture its standard output."""
        logger.debug("Capturing: %s (cwd=%s)", shlex.join(args), cwd or ".")
        result = subprocess.run(  # noqa: S603
            list(args),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode, result.stdout

    def spawn(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        """Start a detached process; the caller never waits on it."""
        logger.debug("Spawning: %s (cwd=%s)", shlex.join(args), cwd or ".")
        subprocess.Popen(  # noqa: S603
            list(args),
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
