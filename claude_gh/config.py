"""Pydantic models for claude-gh configuration and config file loading."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from claude_gh.constants import DEFAULT_DEPENDENCIES
from claude_gh.core.utils import err_console
from claude_gh.worktree.models import DependencyConfig

# --- Config File Loading ---

CONFIG_PATH = Path.home() / ".config" / "claude-gh" / "config.toml"
CONFIG_PATH_2 = Path("claude-gh-config.toml")


def _replace_dashed_keys(cfg: Any) -> Any:
    """Replace dashed keys with underscores in the config options."""
    if isinstance(cfg, dict):
        return {k.replace("-", "_"): v for k, v in cfg.items()}
    if isinstance(cfg, list):
        return [_replace_dashed_keys(item) for item in cfg]
    return cfg


def load_config(config_path_str: str | None = None) -> dict[str, Any]:
    """Load the TOML configuration file and normalize its keys."""
    # Determine which config path to use
    if config_path_str:
        config_path = Path(config_path_str)
    elif CONFIG_PATH.exists():
        config_path = CONFIG_PATH
    elif CONFIG_PATH_2.exists():
        config_path = CONFIG_PATH_2
    else:
        return {}

    if config_path.exists():
        with config_path.open("rb") as f:
            cfg = tomllib.load(f)
            return {k: _replace_dashed_keys(v) for k, v in cfg.items()}

    # Report error only if an explicit path was given
    if config_path_str:
        err_console.print(
            f"[bold red]Config file not found at {config_path_str}[/bold red]",
        )
    return {}


# --- Pydantic Models for Configuration ---


class WorktreeDefaults(BaseModel):
    """Defaults for the ``worktree`` command options (``[worktree]`` section)."""

    model_config = ConfigDict(extra="forbid")

    dir: str | None = None
    new_branch: bool | None = None
    origin: str | None = None
    symlink_deps: bool | None = None
    assistant: str | None = None


class DependencyEntry(BaseModel):
    """An extra dependency ecosystem (``[[dependencies]]`` array)."""

    model_config = ConfigDict(extra="forbid")

    name: str
    dir: str
    lock_files: list[str]
    install: str

    @field_validator("dir")
    @classmethod
    def _relative_dir(cls, v: str) -> str:
        if not v or Path(v).is_absolute() or ".." in Path(v).parts:
            msg = f"dependency dir must be a path inside the repository, got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("lock_files")
    @classmethod
    def _non_empty(cls, v: list[str]) -> list[str]:
        if not v:
            msg = "lock_files must list at least one file"
            raise ValueError(msg)
        return v

    def to_dependency_config(self) -> DependencyConfig:
        """Freeze this entry into a :class:`DependencyConfig`."""
        return DependencyConfig(
            name=self.name,
            dir=self.dir,
            lock_files=tuple(self.lock_files),
            install=self.install,
        )


def worktree_defaults(config: dict[str, Any]) -> dict[str, Any]:
    """Validate the ``[worktree]`` section and return the keys that were set."""
    section = config.get("worktree", {})
    return WorktreeDefaults.model_validate(section).model_dump(exclude_none=True)


def load_dependencies(config: dict[str, Any]) -> tuple[DependencyConfig, ...]:
    """Built-in dependency ecosystems followed by those from the config file.

    Raises:
        pydantic.ValidationError: if a ``[[dependencies]]`` entry is malformed.

    """
    entries = [DependencyEntry.model_validate(e) for e in config.get("dependencies", [])]
    return DEFAULT_DEPENDENCIES + tuple(e.to_dependency_config() for e in entries)
