"""Dependency provisioning for new worktrees.

Two strategies:

- **symlink**: link each ecosystem's installed directory (``node_modules``,
  ``vendor``, ...) from the source repository into the worktree. Fast, but
  every worktree shares the same installed packages.
- **fresh install**: run each applicable ecosystem's install command inside
  the worktree.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import sys
from typing import TYPE_CHECKING

from .errors import DependencyInstallFailedError, NotARepositoryError, SymlinkFailedError
from .git import get_repo_root

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from claude_gh.core.runner import CommandRunner

    from .models import DependencyConfig, WorktreeRequest

logger = logging.getLogger(__name__)


def has_manifest(dep: DependencyConfig, path: Path) -> bool:
    """Check whether any of the ecosystem's manifest/lock files is in *path*."""
    return any((path / name).exists() for name in dep.lock_files)


def _shell_command(command: str, platform: str) -> list[str]:
    if platform == "win32":
        return ["cmd", "/c", command]
    return ["sh", "-c", command]


def install_fresh_dependencies(
    worktree_path: Path,
    dependencies: Sequence[DependencyConfig],
    runner: CommandRunner,
    *,
    platform: str = sys.platform,
    on_log: Callable[[str], None] | None = None,
) -> list[DependencyConfig]:
    """Run the install command of every ecosystem present in the worktree.

    Ecosystems without any manifest file are skipped. The first failing
    install aborts the rest.

    Returns:
        The ecosystems that were installed.

    """
    installed: list[DependencyConfig] = []
    for dep in dependencies:
        if not has_manifest(dep, worktree_path):
            logger.debug("No %s manifest in %s, skipping", dep.name, worktree_path)
            continue

        if on_log:
            on_log(f"Running: {dep.install}")
        try:
            status = runner.run(_shell_command(dep.install, platform), cwd=worktree_path)
        except OSError as e:
            raise DependencyInstallFailedError(dep.install, str(e)) from e
        if status != 0:
            raise DependencyInstallFailedError(dep.install, f"exit status {status}")
        installed.append(dep)
    return installed


def _is_junction(path: Path) -> bool:
    """Check for a Windows directory junction; ``is_symlink()`` never reports these."""
    try:
        st = os.lstat(path)
    except OSError:
        return False
    return getattr(st, "st_reparse_tag", 0) == stat.IO_REPARSE_TAG_MOUNT_POINT


def _remove_existing(target: Path) -> None:
    """Remove whatever is at *target* without following links."""
    if target.is_symlink() or target.is_file():
        target.unlink()
    elif _is_junction(target):
        # rmdir drops the junction itself, leaving the source tree alone
        target.rmdir()
    elif target.is_dir():
        shutil.rmtree(target)


def create_link(
    source: Path,
    target: Path,
    runner: CommandRunner,
    *,
    platform: str = sys.platform,
) -> None:
    """Point *target* at *source*, replacing anything already at *target*.

    Uses a symbolic link, or a directory junction on Windows where symbolic
    links need elevated privileges.
    """
    _remove_existing(target)

    if platform == "win32":
        status = runner.run(["cmd", "/c", "mklink", "/J", str(target), str(source)], quiet=True)
        if status != 0:
            msg = f"mklink exited with status {status}"
            raise OSError(msg)
        return

    target.symlink_to(source, target_is_directory=True)


def symlink_dependencies(
    source_repo: Path,
    worktree_path: Path,
    dependencies: Sequence[DependencyConfig],
    runner: CommandRunner,
    *,
    platform: str = sys.platform,
    on_log: Callable[[str], None] | None = None,
) -> list[DependencyConfig]:
    """Link installed dependency directories from *source_repo* into the worktree.

    Ecosystems not installed in the source repository are skipped. Links
    created before a failure are kept.

    Returns:
        The ecosystems that were linked.

    """
    linked: list[DependencyConfig] = []
    for dep in dependencies:
        source_dep = source_repo / dep.dir
        target_dep = worktree_path / dep.dir

        if not source_dep.exists():
            logger.debug("%s not found, skipping", source_dep)
            continue

        try:
            create_link(source_dep, target_dep, runner, platform=platform)
        except OSError as e:
            raise SymlinkFailedError(dep.dir, str(e)) from e
        if on_log:
            on_log(f"Linked {target_dep} -> {source_dep}")
        linked.append(dep)
    return linked


def provision_dependencies(
    request: WorktreeRequest,
    worktree_path: Path,
    dependencies: Sequence[DependencyConfig],
    runner: CommandRunner,
    *,
    platform: str = sys.platform,
    on_log: Callable[[str], None] | None = None,
) -> list[DependencyConfig]:
    """Provision dependencies for a freshly created worktree.

    The source repository is asked from git rather than assumed to be the
    current directory, so the command works from any subdirectory.
    """
    if request.symlink_deps:
        try:
            source_repo = get_repo_root(runner)
        except NotARepositoryError as e:
            raise SymlinkFailedError("repository root", str(e)) from e
        return symlink_dependencies(
            source_repo,
            worktree_path,
            dependencies,
            runner,
            platform=platform,
            on_log=on_log,
        )
    return install_fresh_dependencies(
        worktree_path,
        dependencies,
        runner,
        platform=platform,
        on_log=on_log,
    )
