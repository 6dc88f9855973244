"""Highscores CLI command -- list the best recorded commits."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..exceptions import CommitPokerError
from ..ledger import HighScoreLedger, ScoreRecord
from ..logging_config import get_logger
from . import app
from ._common import console, context_options, format_score, resolve_config

logger = get_logger(__name__)


@app.command()
def highscores(
    ctx: typer.Context,
    n: Optional[int] = typer.Option(
        None,
        "-n",
        help="Number of scores to list (default: highscore_limit, 10)",
        min=1,
    ),
    repo: Optional[Path] = typer.Option(
        None,
        "--repo",
        "-r",
        help="Only list scores from this repository",
        file_okay=False,
        dir_okay=True,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    List the top scores across all repositories, or for one repository.

    [bold cyan]Examples:[/bold cyan]

      commit-poker-util highscores

      commit-poker-util highscores -n 3 --repo .
    """
    options = context_options(ctx)
    try:
        config = resolve_config(options.get("config_file"), options.get("verbose", False))
        limit = n if n is not None else config.highscore_limit
        records = HighScoreLedger.open(config.ledger_file).top(repo, limit=limit)

    except CommitPokerError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if json_output:
        _output_json(records)
        return

    if not records:
        console.print("[yellow]No scores recorded yet.[/yellow]")
        return

    for record in records:
        console.print(escape(format_score(record)))


def _output_json(records: list[ScoreRecord]) -> None:
    """Machine-readable JSON output."""
    print(json.dumps([r.to_dict() for r in records], indent=2))
