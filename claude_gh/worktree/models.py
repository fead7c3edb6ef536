"""Data models for worktree provisioning."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DependencyConfig:
    """One dependency ecosystem.

    Attributes:
        name: Display name, e.g. ``node``.
        dir: Directory (relative to the repository root) holding installed packages.
        lock_files: Manifest/lock filenames whose presence means the ecosystem applies.
        install: Shell command performing a fresh install.

    """

    name: str
    dir: str
    lock_files: tuple[str, ...]
    install: str


@dataclass(frozen=True)
class WorktreeRequest:
    """Resolved parameters for a single provisioning run."""

    name: str
    branch: str
    base_dir: str = "../"
    new_branch: bool = False
    origin: str | None = None
    symlink_deps: bool = True

    def __post_init__(self) -> None:
        """Normalize an empty origin to ``None``."""
        if not self.origin:
            object.__setattr__(self, "origin", None)

    @property
    def worktree_path(self) -> Path:
        """Destination of the new worktree."""
        return Path(self.base_dir) / self.name
