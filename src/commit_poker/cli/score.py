"""Score CLI command -- score a hash without committing."""

import json

import typer
from rich.markup import escape

from ..exceptions import CommitPokerError, InvalidHashError
from ..scoring import is_valid_hash, score_hash
from . import app
from ._common import console, context_options, resolve_config
from ._display import TerminalPresenter


@app.command()
def score(
    ctx: typer.Context,
    hash_: str = typer.Argument(
        ...,
        metavar="HASH",
        help="Hexadecimal hash to score, e.g. a short commit id",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    Score any hexadecimal hash. Nothing is committed or recorded.

    [bold cyan]Examples:[/bold cyan]

      commit-poker-util score 1234abc

      commit-poker-util score aabbccddeeff --json
    """
    options = context_options(ctx)
    try:
        resolve_config(options.get("config_file"), options.get("verbose", False))
        normalized = hash_.strip().lower()
        if not is_valid_hash(normalized):
            raise InvalidHashError(hash_)

    except CommitPokerError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    result = score_hash(normalized)

    if json_output:
        print(json.dumps(result.to_dict(), indent=2))
        return

    TerminalPresenter(console, reveal_delay=0.0).show_result(result)
