"""Git operations: precondition checks and worktree creation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from claude_gh.constants import DEFAULT_REMOTE

from .errors import (
    BranchNotFoundError,
    NotARepositoryError,
    OriginBranchInvalidError,
    PathAlreadyExistsError,
    WorktreeCreationFailedError,
)

if TYPE_CHECKING:
    from claude_gh.core.runner import CommandRunner

    from .models import WorktreeRequest

logger = logging.getLogger(__name__)


def validate_repository(runner: CommandRunner) -> None:
    """Fail unless the current directory is inside a git repository."""
    try:
        status = runner.run(["git", "rev-parse", "--git-dir"], quiet=True)
    except OSError as e:
        msg = f"git is not installed or not in PATH ({e})"
        raise NotARepositoryError(msg) from e
    if status != 0:
        raise NotARepositoryError


def _ref_exists(runner: CommandRunner, ref: str) -> bool:
    return runner.run(["git", "show-ref", "--verify", "--quiet", ref], quiet=True) == 0


def branch_exists(runner: CommandRunner, branch: str, remote: str = DEFAULT_REMOTE) -> bool:
    """Check for a local branch or a remote-tracking branch under *remote*."""
    if _ref_exists(runner, f"refs/heads/{branch}"):
        return True
    return _ref_exists(runner, f"refs/remotes/{remote}/{branch}")


def validate_branch_exists(runner: CommandRunner, branch: str, remote: str = DEFAULT_REMOTE) -> None:
    """Raise :class:`BranchNotFoundError` if *branch* exists neither locally nor on *remote*."""
    if not branch_exists(runner, branch, remote):
        raise BranchNotFoundError(branch, remote)


def validate_target_free(path: Path) -> None:
    """Raise :class:`PathAlreadyExistsError` if *path* is taken."""
    # lexists: a dangling link still blocks `git worktree add`
    if path.exists() or path.is_symlink():
        raise PathAlreadyExistsError(path)


def validate_request(request: WorktreeRequest, runner: CommandRunner) -> None:
    """Run every precondition check for *request*.

    The target branch is only checked when checking out an existing branch;
    a new branch is expected not to exist yet. Nothing is modified here.
    """
    validate_repository(runner)

    if not request.new_branch:
        validate_branch_exists(runner, request.branch)

    if request.origin:
        try:
            validate_branch_exists(runner, request.origin)
        except BranchNotFoundError as e:
            raise OriginBranchInvalidError(request.origin, str(e)) from e

    validate_target_free(request.worktree_path)


def worktree_add_args(request: WorktreeRequest) -> list[str]:
    """Build the ``git worktree add`` command line for *request*."""
    args = ["git", "worktree", "add"]
    path = str(request.worktree_path)
    if request.new_branch:
        args.extend(["-b", request.branch, path])
        if request.origin:
            args.append(request.origin)
    else:
        args.extend([path, request.branch])
    return args


def create_worktree(request: WorktreeRequest, runner: CommandRunner) -> Path:
    """Create the worktree, streaming git's own output to the console.

    Returns the worktree path as given in the request.
    """
    args = worktree_add_args(request)
    try:
        status = runner.run(args)
    except OSError as e:
        msg = f"failed to create worktree: {e}"
        raise WorktreeCreationFailedError(msg) from e
    if status != 0:
        msg = f"failed to create worktree: git exited with status {status}"
        raise WorktreeCreationFailedError(msg)
    logger.info("Created worktree at %s", request.worktree_path)
    return request.worktree_path


def get_repo_root(runner: CommandRunner) -> Path:
    """Return the top-level directory of the repository we were invoked from."""
    try:
        status, output = runner.capture(["git", "rev-parse", "--show-toplevel"])
    except OSError as e:
        raise NotARepositoryError(str(e)) from e
    if status != 0 or not output.strip():
        msg = "could not determine repository root"
        raise NotARepositoryError(msg)
    return Path(output.strip())
