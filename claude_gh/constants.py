"""Default configuration settings for claude-gh."""

from __future__ import annotations

from claude_gh.worktree.models import DependencyConfig

# --- Worktree Defaults ---
DEFAULT_WORKTREE_DIR = "../"
DEFAULT_REMOTE = "origin"

# --- Assistant ---
DEFAULT_ASSISTANT_COMMAND = "claude"
ASSISTANT_ENV_VAR = "CLAUDE_GH_ASSISTANT"

# --- Dependency Ecosystems ---
# Order is processing order; every matching ecosystem is handled.
DEFAULT_DEPENDENCIES: tuple[DependencyConfig, ...] = (
    DependencyConfig(
        name="node",
        dir="node_modules",
        lock_files=("package.json", "package-lock.json", "yarn.lock", "pnpm-lock.yaml"),
        install="npm ci",
    ),
    DependencyConfig(
        name="composer",
        dir="vendor",
        lock_files=("composer.json", "composer.lock"),
        install="composer install",
    ),
)
