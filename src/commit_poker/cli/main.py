"""Top-level options shared by the utility subcommands."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import console, context_options


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Inspect Commit Poker high scores and score arbitrary hashes.

    [bold cyan]Examples:[/bold cyan]

      commit-poker-util highscores -n 5

      commit-poker-util highscores --repo ~/src/project

      commit-poker-util score deadbeef
    """
    options = context_options(ctx)
    options["config_file"] = config
    options["verbose"] = verbose

    if version:
        from .. import __version__

        console.print(f"[bold cyan]Commit Poker[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)
