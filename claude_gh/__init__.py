"""claude-gh - Git worktrees with shared dependencies and a Claude session per branch."""

from __future__ import annotations

__version__ = "0.1.0"
