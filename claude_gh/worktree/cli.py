"""The ``worktree`` command."""

from __future__ import annotations

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel

from claude_gh.cli import app as main_app
from claude_gh.config import load_dependencies
from claude_gh.constants import (
    ASSISTANT_ENV_VAR,
    DEFAULT_ASSISTANT_COMMAND,
    DEFAULT_WORKTREE_DIR,
)
from claude_gh.core.runner import SubprocessRunner
from claude_gh.core.utils import console

from ._output import error, info
from .errors import ProvisioningError
from .models import WorktreeRequest
from .workflow import provision


@main_app.command("worktree")
def worktree_command(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(help="Directory name of the new worktree, created inside --dir"),
    ],
    branch: Annotated[
        str,
        typer.Argument(help="Branch to check out (or to create with --new-branch)"),
    ],
    base_dir: Annotated[
        str,
        typer.Option("--dir", "-d", help="Base directory for new worktrees"),
    ] = DEFAULT_WORKTREE_DIR,
    new_branch: Annotated[
        bool,
        typer.Option("--new-branch", "-b", help="Create BRANCH as a new branch instead of checking it out"),
    ] = False,
    origin: Annotated[
        str | None,
        typer.Option("--origin", "-o", help="Starting branch for --new-branch. Defaults to the current HEAD"),
    ] = None,
    symlink_deps: Annotated[
        bool,
        typer.Option(
            "--symlink-deps/--no-symlink-deps",
            "-s/-S",
            help="Link node_modules, vendor, etc. from the main repository instead of installing fresh",
        ),
    ] = True,
    assistant: Annotated[
        str,
        typer.Option(
            "--assistant",
            envvar=ASSISTANT_ENV_VAR,
            help="Command started in the new terminal",
        ),
    ] = DEFAULT_ASSISTANT_COMMAND,
) -> None:
    """Create a git worktree and open Claude in a new terminal.

    **What happens:**

    1. Checks the repository, the branches and that `DIR/NAME` is free
    2. Runs `git worktree add` (with `-b` for `--new-branch`)
    3. Links dependency directories from the main repository, or runs
       `npm ci` / `composer install` with `--no-symlink-deps`
    4. Opens a new terminal window in the worktree running `claude`

    **Examples:**

    - `claude-gh worktree feature-x main` - Check out `main` in `../feature-x`
    - `claude-gh worktree feat feat -b -o develop -S` - New branch from `develop`, fresh install
    """
    try:
        dependencies = load_dependencies(ctx.obj or {})
    except ValidationError as e:
        error(f"invalid [[dependencies]] config: {e}")

    request = WorktreeRequest(
        name=name,
        branch=branch,
        base_dir=base_dir,
        new_branch=new_branch,
        origin=origin,
        symlink_deps=symlink_deps,
    )

    try:
        path = provision(
            request,
            SubprocessRunner(),
            dependencies=dependencies,
            assistant_command=assistant,
            on_log=info,
        )
    except ProvisioningError as e:
        error(f"{e} (stage: {e.stage})")

    console.print()
    console.print(
        Panel(
            f"[bold]Worktree created:[/bold] {escape(str(path))}\n[bold]Branch:[/bold] {escape(branch)}",
            title="[green]Success[/green]",
            border_style="green",
        ),
    )
