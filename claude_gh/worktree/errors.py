"""Errors raised by the provisioning workflow.

Each error carries the ``stage`` it belongs to so the CLI can report which
part of the run failed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ProvisioningError(Exception):
    """Base class for all provisioning failures."""

    stage = "provision"


class NotARepositoryError(ProvisioningError):
    """The current directory is not inside a git repository."""

    stage = "validate"

    def __init__(self, message: str = "not a git repository (or any of the parent directories)") -> None:
        super().__init__(message)


class BranchNotFoundError(ProvisioningError):
    """A branch exists neither locally nor on the default remote."""

    stage = "validate"

    def __init__(self, branch: str, remote: str = "origin") -> None:
        self.branch = branch
        super().__init__(f"branch '{branch}' not found locally or in {remote}")


class OriginBranchInvalidError(ProvisioningError):
    """The starting branch for a new branch does not exist."""

    stage = "validate"

    def __init__(self, branch: str, reason: str) -> None:
        self.branch = branch
        super().__init__(f"origin branch invalid: {reason}")


class PathAlreadyExistsError(ProvisioningError):
    """The destination directory of the worktree already exists."""

    stage = "validate"

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"directory already exists: {path}")


class WorktreeCreationFailedError(ProvisioningError):
    """``git worktree add`` failed."""

    stage = "create"


class DependencyInstallFailedError(ProvisioningError):
    """A fresh dependency install command exited non-zero."""

    stage = "dependencies"

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        super().__init__(f"failed to run {command}: {reason}")


class SymlinkFailedError(ProvisioningError):
    """Linking a dependency directory into the worktree failed."""

    stage = "dependencies"

    def __init__(self, ecosystem: str, reason: str) -> None:
        self.ecosystem = ecosystem
        super().__init__(f"failed to symlink {ecosystem}: {reason}")


class LaunchFailedError(ProvisioningError):
    """The terminal process could not be started."""

    stage = "launch"


class UnsupportedPlatformError(LaunchFailedError):
    """No terminal launcher exists for this platform."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"unsupported platform: {platform}")
