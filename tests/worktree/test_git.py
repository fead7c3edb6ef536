"""Tests for precondition checks and worktree creation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from claude_gh.worktree.errors import (
    BranchNotFoundError,
    NotARepositoryError,
    OriginBranchInvalidError,
    PathAlreadyExistsError,
    WorktreeCreationFailedError,
)
from claude_gh.worktree.git import (
    branch_exists,
    create_worktree,
    get_repo_root,
    validate_branch_exists,
    validate_repository,
    validate_request,
    validate_target_free,
    worktree_add_args,
)
from claude_gh.worktree.models import WorktreeRequest

if TYPE_CHECKING:
    from conftest import FakeRunner


class TestValidateRepository:
    """Tests for validate_repository."""

    def test_inside_repo(self, fake_runner: FakeRunner) -> None:
        """A successful rev-parse means we are in a repository."""
        validate_repository(fake_runner)
        assert fake_runner.commands() == [["git", "rev-parse", "--git-dir"]]

    def test_outside_repo(self, fake_runner: FakeRunner) -> None:
        """Non-zero rev-parse raises NotARepositoryError."""
        fake_runner.in_repo = False
        with pytest.raises(NotARepositoryError, match="not a git repository"):
            validate_repository(fake_runner)

    def test_git_not_installed(self, fake_runner: FakeRunner) -> None:
        """A missing git binary is reported as not a repository."""
        fake_runner.missing.add("git")
        with pytest.raises(NotARepositoryError, match="git is not installed"):
            validate_repository(fake_runner)


class TestBranchExists:
    """Tests for branch lookup."""

    def test_local_branch(self, fake_runner: FakeRunner) -> None:
        """A local branch is found without querying the remote."""
        fake_runner.refs.add("refs/heads/main")
        assert branch_exists(fake_runner, "main") is True
        assert len(fake_runner.calls) == 1

    def test_remote_branch(self, fake_runner: FakeRunner) -> None:
        """A remote-tracking branch under origin is accepted."""
        fake_runner.refs.add("refs/remotes/origin/develop")
        assert branch_exists(fake_runner, "develop") is True
        assert fake_runner.commands()[-1] == [
            "git",
            "show-ref",
            "--verify",
            "--quiet",
            "refs/remotes/origin/develop",
        ]

    def test_missing_branch(self, fake_runner: FakeRunner) -> None:
        """Missing everywhere raises BranchNotFoundError."""
        with pytest.raises(BranchNotFoundError, match="'nope' not found locally or in origin") as exc:
            validate_branch_exists(fake_runner, "nope")
        assert exc.value.branch == "nope"


class TestValidateTargetFree:
    """Tests for validate_target_free."""

    def test_free(self, tmp_path: Path) -> None:
        """A non-existent path passes."""
        validate_target_free(tmp_path / "new")

    def test_existing_directory(self, tmp_path: Path) -> None:
        """An existing directory is rejected."""
        (tmp_path / "taken").mkdir()
        with pytest.raises(PathAlreadyExistsError, match="directory already exists"):
            validate_target_free(tmp_path / "taken")

    def test_dangling_symlink(self, tmp_path: Path) -> None:
        """A dangling link still occupies the path."""
        (tmp_path / "link").symlink_to(tmp_path / "gone")
        with pytest.raises(PathAlreadyExistsError):
            validate_target_free(tmp_path / "link")


class TestValidateRequest:
    """Tests for the combined precondition policy."""

    def test_existing_branch_checkout(self, fake_runner: FakeRunner, tmp_path: Path) -> None:
        """Checking out an existing branch validates it."""
        fake_runner.refs.add("refs/heads/main")
        request = WorktreeRequest(name="wt", branch="main", base_dir=str(tmp_path))
        validate_request(request, fake_runner)

    def test_missing_branch_checkout(self, fake_runner: FakeRunner, tmp_path: Path) -> None:
        """Checking out a missing branch fails."""
        request = WorktreeRequest(name="wt", branch="main", base_dir=str(tmp_path))
        with pytest.raises(BranchNotFoundError):
            validate_request(request, fake_runner)

    def test_new_branch_skips_target_check(self, fake_runner: FakeRunner, tmp_path: Path) -> None:
        """A new branch is expected not to exist yet."""
        request = WorktreeRequest(name="wt", branch="feat", base_dir=str(tmp_path), new_branch=True)
        validate_request(request, fake_runner)
        assert not any("refs/heads/feat" in args for args in fake_runner.commands())

    def test_invalid_origin(self, fake_runner: FakeRunner, tmp_path: Path) -> None:
        """A missing origin branch is wrapped in OriginBranchInvalidError."""
        request = WorktreeRequest(
            name="wt",
            branch="feat",
            base_dir=str(tmp_path),
            new_branch=True,
            origin="develop",
        )
        with pytest.raises(OriginBranchInvalidError, match="origin branch invalid") as exc:
            validate_request(request, fake_runner)
        assert isinstance(exc.value.__cause__, BranchNotFoundError)

    def test_existing_path_runs_no_mutation(self, fake_runner: FakeRunner, tmp_path: Path) -> None:
        """An occupied destination fails without mutating anything."""
        fake_runner.refs.add("refs/heads/main")
        (tmp_path / "wt").mkdir()
        request = WorktreeRequest(name="wt", branch="main", base_dir=str(tmp_path))
        with pytest.raises(PathAlreadyExistsError):
            validate_request(request, fake_runner)
        assert fake_runner.mutating_commands() == []


class TestWorktreeAddArgs:
    """Tests for building the git worktree add command."""

    def test_existing_branch(self) -> None:
        """Path first, then branch."""
        request = WorktreeRequest(name="feature-x", branch="main")
        assert worktree_add_args(request) == ["git", "worktree", "add", "../feature-x", "main"]

    def test_new_branch(self) -> None:
        """-b BRANCH PATH, starting at HEAD."""
        request = WorktreeRequest(name="feat", branch="feat", new_branch=True)
        assert worktree_add_args(request) == ["git", "worktree", "add", "-b", "feat", "../feat"]

    def test_new_branch_with_origin(self) -> None:
        """The origin branch is appended as the start point."""
        request = WorktreeRequest(name="feat", branch="feat", new_branch=True, origin="develop")
        assert worktree_add_args(request) == [
            "git",
            "worktree",
            "add",
            "-b",
            "feat",
            "../feat",
            "develop",
        ]

    def test_empty_origin_is_ignored(self) -> None:
        """An empty origin string behaves like no origin."""
        request = WorktreeRequest(name="feat", branch="feat", new_branch=True, origin="")
        assert request.origin is None
        assert worktree_add_args(request)[-1] == "../feat"


class TestCreateWorktree:
    """Tests for create_worktree."""

    def test_success(self, fake_runner: FakeRunner, tmp_path: Path) -> None:
        """Returns the requested path."""
        request = WorktreeRequest(name="wt", branch="main", base_dir=str(tmp_path))
        assert create_worktree(request, fake_runner) == tmp_path / "wt"
        assert (tmp_path / "wt").is_dir()

    def test_git_failure(self, fake_runner: FakeRunner, tmp_path: Path) -> None:
        """A non-zero exit is wrapped in WorktreeCreationFailedError."""
        request = WorktreeRequest(name="wt", branch="main", base_dir=str(tmp_path))
        fake_runner.exit_codes[" ".join(worktree_add_args(request))] = 128
        with pytest.raises(WorktreeCreationFailedError, match="status 128"):
            create_worktree(request, fake_runner)


class TestGetRepoRoot:
    """Tests for get_repo_root."""

    def test_strips_output(self, fake_runner: FakeRunner) -> None:
        """The trailing newline from git is removed."""
        fake_runner.toplevel = Path("/src/repo")
        assert get_repo_root(fake_runner) == Path("/src/repo")

    def test_failure(self, fake_runner: FakeRunner) -> None:
        """A failing rev-parse raises NotARepositoryError."""
        with pytest.raises(NotARepositoryError):
            get_repo_root(fake_runner)
