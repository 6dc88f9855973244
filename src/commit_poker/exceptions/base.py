"""Base exception for Commit Poker."""

from typing import Dict, Optional


class CommitPokerError(Exception):
    """Base exception for all Commit Poker errors.

    Renders as ``<message>[: <cause>][ (key=value, ...)]``, e.g.
    ``Error using application data directory: could not lock ledger
    (path=/home/me/.local/share/commit-poker/highscores.json)``.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, str]] = None,
        cause: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    @property
    def headline(self) -> str:
        """Message and cause, without the details."""
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.headline} ({details_str})"
        return self.headline
