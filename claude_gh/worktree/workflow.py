"""The provisioning workflow: validate, create, provision, launch.

Stages run strictly in order and the first failure aborts the run. Nothing
created by an earlier stage is rolled back when a later stage fails.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from claude_gh.constants import DEFAULT_ASSISTANT_COMMAND, DEFAULT_DEPENDENCIES

from .dependencies import provision_dependencies
from .git import create_worktree, validate_request
from .terminals import open_terminal_with_assistant

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from claude_gh.core.runner import CommandRunner

    from .models import DependencyConfig, WorktreeRequest

logger = logging.getLogger(__name__)


def _noop(_msg: str) -> None:
    pass


def provision(
    request: WorktreeRequest,
    runner: CommandRunner,
    *,
    dependencies: Sequence[DependencyConfig] = DEFAULT_DEPENDENCIES,
    assistant_command: str = DEFAULT_ASSISTANT_COMMAND,
    platform: str = sys.platform,
    which: Callable[[str], str | None] | None = None,
    on_log: Callable[[str], None] = _noop,
) -> Path:
    """Create a worktree for *request* and open the assistant in it.

    Args:
        request: The validated-once, immutable run parameters.
        runner: Executes git, install commands and the terminal.
        dependencies: Dependency ecosystems to link or install.
        assistant_command: Command run in the new terminal.
        platform: ``sys.platform`` value used to pick the terminal.
        which: PATH lookup used to probe Linux terminals.
        on_log: Receives progress messages.

    Returns:
        Absolute path of the new worktree.

    Raises:
        ProvisioningError: a subclass naming the failing stage.

    """
    logger.debug("Provisioning %s", request)

    validate_request(request, runner)

    on_log(f"Creating worktree at {request.worktree_path} for branch '{request.branch}'...")
    worktree_path = create_worktree(request, runner)

    strategy = "Linking" if request.symlink_deps else "Installing"
    on_log(f"{strategy} dependencies...")
    handled = provision_dependencies(
        request,
        worktree_path,
        dependencies,
        runner,
        platform=platform,
        on_log=on_log,
    )
    if not handled:
        on_log("No dependencies to provision")

    return open_terminal_with_assistant(
        worktree_path,
        assistant_command,
        runner,
        platform=platform,
        which=which,
    )
