"""Shared CLI helpers."""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import PokerConfig, load_config
from ..ledger import ScoreRecord
from ..logging_config import setup_logging

console = Console(highlight=False)


def resolve_config(
    config_file: Optional[Path] = None,
    verbose: bool = False,
    **overrides,
) -> PokerConfig:
    """Build config from CLI options and switch logging to match."""
    config = load_config(config_file=config_file, verbose=verbose, **overrides)
    setup_logging(
        verbose=config.verbosity == "verbose",
        quiet=config.verbosity == "quiet",
        log_file=os.path.expanduser(config.log_file) if config.log_file else None,
    )
    return config


def context_options(ctx: typer.Context) -> dict:
    """Options stored by the app callback for subcommands."""
    ctx.ensure_object(dict)
    return ctx.obj


def format_timestamp(seconds: int) -> str:
    """Local time, e.g. ``2024-03-01 14:02:11 +0100``."""
    try:
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()
    except (OverflowError, OSError, ValueError):
        return f"@{seconds}"
    return moment.strftime("%Y-%m-%d %H:%M:%S %z")


def format_score(record: ScoreRecord) -> str:
    """One ledger line: ``<commit>: <score> points (<rules>) scored on <time>``."""
    rules = ", ".join(record.rules)
    return (
        f"{record.commit}: {record.score} points ({rules}) "
        f"scored on {format_timestamp(record.date)}"
    )
