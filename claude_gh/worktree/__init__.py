"""Worktree provisioning: validate, create, provision dependencies, launch.

- Precondition validation and ``git worktree add`` (``git``)
- Dependency sharing via links or fresh installs (``dependencies``)
- Terminal launch per platform (``terminals``)
- The sequential workflow tying them together (``workflow``)
"""

from __future__ import annotations

# Note: the ``worktree`` command is intentionally NOT imported here to avoid
# circular imports. Import directly from claude_gh.worktree.cli if needed.
