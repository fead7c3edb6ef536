"""Shared CLI functionality for claude-gh."""

from __future__ import annotations

from typing import Annotated, Any

import typer
from pydantic import ValidationError

from .config import load_config, worktree_defaults
from .core.log import setup_rich_logging
from .core.utils import console, err_console

app = typer.Typer(
    name="claude-gh",
    help="Short helper for using Claude with git worktrees.",
    add_completion=True,
    rich_markup_mode="markdown",
)

# Config keys whose option parameter is named differently
_OPTION_NAMES = {"dir": "base_dir"}


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config_file: Annotated[
        str | None,
        typer.Option("--config", "-c", help="Path to config file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Diagnostic log level: debug, info, warning, error",
        ),
    ] = "warning",
) -> None:
    """Create git worktrees and open Claude in a new terminal for each."""
    if ctx.invoked_subcommand is None:
        console.print("[bold red]No command specified.[/bold red]")
        console.print("[bold yellow]Running --help for your convenience.[/bold yellow]")
        console.print(ctx.get_help())
        raise typer.Exit

    import dotenv  # noqa: PLC0415

    dotenv.load_dotenv()
    setup_rich_logging(log_level)
    set_config_defaults(ctx, config_file)


def set_config_defaults(ctx: typer.Context, config_file: str | None) -> dict[str, Any]:
    """Load the config file, expose it on ``ctx.obj`` and set subcommand defaults.

    Click looks up a subcommand's defaults under ``ctx.default_map[<name>]``,
    so the ``[worktree]`` section becomes the ``worktree`` command's defaults.
    """
    config = load_config(config_file)
    try:
        defaults = worktree_defaults(config)
    except ValidationError as e:
        err_console.print(f"[bold red]Error:[/bold red] invalid [worktree] config: {e}")
        raise typer.Exit(1) from e

    ctx.obj = config
    ctx.default_map = {"worktree": {_OPTION_NAMES.get(k, k): v for k, v in defaults.items()}}
    return config


def main() -> None:
    """Console-script entry point."""
    app()


# Import commands from other modules to register them
from .worktree import cli as worktree_cli  # noqa: E402, F401
