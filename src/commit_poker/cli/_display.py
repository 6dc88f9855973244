"""Terminal presentation of scores and high scores."""

import random
import time
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..ledger import ScoreRecord
from ..scoring import ScoringResult

BASE_STYLE = "bold"
MATCH_COLOURS = ("red", "green", "yellow", "blue", "magenta", "cyan")


def hash_styles(result: ScoringResult, rng: Optional[random.Random] = None) -> list[str]:
    """Style per hash character; each position group gets its own colour.

    Colours are shuffled per call. Groups beyond the palette stay plain.
    """
    colours = list(MATCH_COLOURS)
    (rng or random).shuffle(colours)

    styles = [BASE_STYLE] * len(result.hash)
    groups = [group for match in result.matches for group in match.positions]
    for group, colour in zip(groups, colours):
        for position in group:
            styles[position] = f"{BASE_STYLE} {colour}"
    return styles


class TerminalPresenter:
    """Renders the commit flow. ``reveal_delay`` paces the hash reveal."""

    def __init__(
        self,
        console: Console,
        reveal_delay: float = 0.0,
        rng: Optional[random.Random] = None,
    ):
        self.console = console
        self.reveal_delay = reveal_delay
        self.rng = rng

    def pre_commit(self) -> None:
        self.console.print("Committing ...")

    def failed(self) -> None:
        self.console.print("[red]Failed to commit[/red]")

    def post_commit(self, result: ScoringResult) -> None:
        self.console.print("done!")
        self.show_result(result)

    def show_result(self, result: ScoringResult) -> None:
        self.console.print("Your commit hash is ... ", end="")
        for char, style in zip(result.hash, hash_styles(result, self.rng)):
            if self.reveal_delay:
                time.sleep(self.reveal_delay)
            self.console.print(Text(char, style=style), end="")
        self.console.print()

        for match in result.matches:
            self.console.print(
                f"[cyan]> {escape(match.name)} - {escape(match.description)}[/cyan]"
            )
            self.console.print(f"    [cyan]Points:  {match.points}[/cyan]")

        points = result.total_points
        sad = " :(" if points == 0 else ""
        self.console.print(f"[magenta]Total points: [bold]{points}[/bold]{sad}[/magenta]")

    def high_score(self, new: ScoreRecord, old: ScoreRecord) -> None:
        self.console.print(
            f"[green]New high score! [bold]{new.score}[/bold] points![/green]"
        )
        self.console.print("Previous high score:")
        self.console.print(
            f"    [bold]{old.score}[/bold] points from [bold]{escape(old.commit)}[/bold]: "
            f"{escape(', '.join(old.rules))}"
        )
