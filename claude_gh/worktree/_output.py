"""Console output helpers for the worktree command."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.markup import escape

from claude_gh.core.utils import console, err_console


def error(msg: str) -> NoReturn:
    """Print an error message and exit."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(msg)}")
    raise typer.Exit(1)


def info(msg: str) -> None:
    """Print an info message, with special styling for commands."""
    if msg.startswith("Running: "):
        cmd = escape(msg[9:])
        console.print(f"[dim]→[/dim] Running: [bold cyan]{cmd}[/bold cyan]")
    else:
        console.print(f"[dim]→[/dim] {escape(msg)}")
