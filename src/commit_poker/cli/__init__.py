"""CLI entry points; importing this package registers all subcommands."""

import typer

app = typer.Typer(
    name="commit-poker-util",
    help="Commit Poker utilities - high scores and hash scoring",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .highscores import highscores as _highscores  # noqa: F401, E402
from .score import score as _score  # noqa: F401, E402
from .commit import commit_app  # noqa: E402

__all__ = ["app", "commit_app"]
