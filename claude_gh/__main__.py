"""Allow running as ``python -m claude_gh``."""

from __future__ import annotations

from claude_gh.cli import main

if __name__ == "__main__":
    main()
