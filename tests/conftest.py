"""Shared test fixtures and configuration."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Sequence


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Set default timeout for all tests."""
    for item in items:
        with contextlib.suppress(AttributeError):
            item.add_marker(pytest.mark.timeout(3))


@dataclass
class FakeRunner:
    """In-memory :class:`~claude_gh.core.runner.CommandRunner`.

    Git refs listed in ``refs`` resolve, ``git worktree add`` creates the
    worktree directory, and any command in ``exit_codes`` (keyed by its
    joined argv) returns the scripted status.
    """

    refs: set[str] = field(default_factory=set)
    toplevel: Path | None = None
    exit_codes: dict[str, int] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)
    in_repo: bool = True
    calls: list[tuple[str, list[str], Path | None]] = field(default_factory=list)

    def _check_program(self, args: Sequence[str]) -> None:
        if args[0] in self.missing:
            msg = f"No such file or directory: {args[0]!r}"
            raise FileNotFoundError(msg)

    def run(self, args: Sequence[str], *, cwd: Path | None = None, quiet: bool = False) -> int:  # noqa: ARG002
        args = list(args)
        self.calls.append(("run", args, cwd))
        self._check_program(args)
        key = " ".join(args)
        if key in self.exit_codes:
            return self.exit_codes[key]
        if args[:3] == ["git", "rev-parse", "--git-dir"]:
            return 0 if self.in_repo else 128
        if args[:2] == ["git", "show-ref"]:
            return 0 if args[-1] in self.refs else 1
        if args[:3] == ["git", "worktree", "add"]:
            path = args[5] if args[3] == "-b" else args[3]
            Path(path).mkdir(parents=True)
        return 0

    def capture(self, args: Sequence[str], *, cwd: Path | None = None) -> tuple[int, str]:
        args = list(args)
        self.calls.append(("capture", args, cwd))
        self._check_program(args)
        if args[:3] == ["git", "rev-parse", "--show-toplevel"]:
            if self.toplevel is None:
                return 128, ""
            return 0, f"{self.toplevel}\n"
        return 0, ""

    def spawn(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        args = list(args)
        self.calls.append(("spawn", args, cwd))
        self._check_program(args)

    def commands(self, kind: str | None = None) -> list[list[str]]:
        """Argv of every recorded call, optionally filtered by kind."""
        return [args for k, args, _ in self.calls if kind is None or k == kind]

    def mutating_commands(self) -> list[list[str]]:
        """Calls that change state (anything but read-only git queries)."""
        read_only = (["git", "rev-parse"], ["git", "show-ref"])
        return [args for args in self.commands() if args[:2] not in read_only]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Provide a fake command runner with no refs configured."""
    return FakeRunner()


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a source repository directory and chdir into it."""
    root = tmp_path / "repo"
    root.mkdir()
    monkeypatch.chdir(root)
    return root

