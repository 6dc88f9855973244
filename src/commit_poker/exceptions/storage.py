"""Ledger storage exceptions."""

from pathlib import Path
from typing import Optional

from .base import CommitPokerError


class StorageUnavailableError(CommitPokerError):
    """Raised for any failure resolving, locking, reading or writing the ledger.

    Lock, truncate, serialization and deserialization failures all surface as
    this one kind; none are retried.
    """

    def __init__(self, reason: str, path: Optional[Path] = None):
        details = {"path": str(path)} if path is not None else None

        super().__init__(
            "Error using application data directory", details=details, cause=reason
        )
        self.reason = reason
        self.path = path
