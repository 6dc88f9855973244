"""Exception hierarchy for Commit Poker."""

from .base import CommitPokerError
from .config import ConfigurationError, InvalidConfigError, InvalidHashError
from .git import GitCommandError, GitError, GitNotFoundError
from .storage import StorageUnavailableError

__all__ = [
    "CommitPokerError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidHashError",
    "GitError",
    "GitNotFoundError",
    "GitCommandError",
    "StorageUnavailableError",
]
