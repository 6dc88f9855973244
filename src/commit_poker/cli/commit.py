"""``commit-poker``: run git commit, then score the new hash.

Every argument is passed straight through to ``git commit``; settings come
from the config file and ``COMMIT_POKER_*`` environment variables.
"""

from pathlib import Path
from typing import Optional, Sequence

import typer
from rich.markup import escape

from ..exceptions import CommitPokerError, GitError, StorageUnavailableError
from ..git import GitClient
from ..ledger import HighScoreLedger, ScoreRecord, is_new_high_score
from ..logging_config import get_logger
from ..scoring import score_hash
from ._common import console, resolve_config
from ._display import TerminalPresenter

logger = get_logger(__name__)

commit_app = typer.Typer(
    name="commit-poker",
    help="Commit with git and score the resulting hash like a poker hand.",
    add_completion=False,
    rich_markup_mode="rich",
)


def play_round(
    client: GitClient,
    presenter: TerminalPresenter,
    ledger_location: Optional[Path],
    git_args: Sequence[str],
) -> ScoreRecord:
    """Commit, score, present, then persist.

    The score is shown before the ledger is opened.

    Raises:
        GitError: The commit failed; nothing was scored or stored
        StorageUnavailableError: The score was shown but not saved
    """
    presenter.pre_commit()
    try:
        client.commit(git_args)
        info = client.latest_commit()
    except GitError:
        presenter.failed()
        raise

    result = score_hash(info.short_hash)
    record = ScoreRecord.from_result(result, info)
    presenter.post_commit(result)
    logger.info("Scored %s: %d points", info.short_hash, record.score)

    ledger = HighScoreLedger.open(ledger_location)
    previous = ledger.top(info.repo, limit=1)
    best = previous[0] if previous else None
    if is_new_high_score(record, best):
        presenter.high_score(record, best)
    ledger.append(record)
    return record


@commit_app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def commit(ctx: typer.Context):
    """
    Run [bold]git commit[/bold] with the given arguments and score the hash.

    [bold cyan]Examples:[/bold cyan]

      commit-poker -m "Fix parser"

      commit-poker --amend --no-edit
    """
    try:
        config = resolve_config()
        presenter = TerminalPresenter(console, reveal_delay=config.reveal_delay_seconds)
        client = GitClient(executable=config.git_executable)
        play_round(client, presenter, config.ledger_file, list(ctx.args))

    except StorageUnavailableError as e:
        logger.error("Score not saved: %s", e)
        console.print(f"[red]Could not save score:[/red] {escape(e.headline)}")
        raise typer.Exit(1)

    except CommitPokerError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)
