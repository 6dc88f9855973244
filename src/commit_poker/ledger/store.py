"""File-backed high-score ledger shared by concurrent invocations.

The whole ledger is one JSON array in one file. Readers take a shared
``flock`` and writers an exclusive one for their full read-modify-write
cycle, so no reader sees a half-written file and no two writers interleave.
Every operation re-reads the file; nothing is cached between calls.

Usage::

    ledger = HighScoreLedger.open()
    previous = ledger.top(repo)
    ledger.append(record)
"""

from __future__ import annotations

import fcntl
import json
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Optional, Union

from ..exceptions import StorageUnavailableError
from ..logging_config import get_logger
from .models import ScoreRecord
from .paths import default_ledger_path

logger = get_logger(__name__)

PathLike = Union[str, Path]


def canonical_repo(path: PathLike, strict: bool = False) -> str:
    """Canonical form of a repository path, used as the ledger partition key.

    Raises:
        StorageUnavailableError: If the path is malformed, or in strict
            mode does not exist.
    """
    try:
        return str(Path(path).expanduser().resolve(strict=strict))
    except (OSError, RuntimeError, ValueError) as e:
        raise StorageUnavailableError(f"could not canonicalize repository path: {e}") from e


class HighScoreLedger:
    """Handle on the ledger file. Create with ``HighScoreLedger.open``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def open(cls, location: Optional[PathLike] = None) -> HighScoreLedger:
        """Resolve the backing file, creating it and its directories if absent.

        Args:
            location: Explicit ledger file; defaults to the per-user data
                directory

        Raises:
            StorageUnavailableError: If the directory cannot be created or
                the file cannot be opened for read and write
        """
        path = Path(location).expanduser() if location is not None else default_ledger_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "a+", encoding="utf-8"):
                pass
        except (OSError, ValueError) as e:
            raise StorageUnavailableError(str(e), path) from e

        logger.debug("High-score ledger at %s", path)
        return cls(path)

    # ── operations ────────────────────────────────────────────────

    def append(self, record: ScoreRecord) -> None:
        """Add ``record`` and rewrite the whole file under an exclusive lock."""
        with self._locked(exclusive=True) as handle:
            records = self._read_records(handle)
            records.append(record)
            try:
                handle.seek(0)
                handle.truncate()
                json.dump([r.to_dict() for r in records], handle)
                handle.flush()
                os.fsync(handle.fileno())
            except (OSError, TypeError, ValueError) as e:
                raise StorageUnavailableError(f"could not write ledger: {e}", self.path) from e

        logger.debug("Appended %s (%d points); ledger holds %d records",
                     record.commit, record.score, len(records))

    def query(self, repo: Optional[PathLike] = None) -> list[ScoreRecord]:
        """Records sorted by score, highest first.

        Args:
            repo: Only return records of this repository. Paths are compared
                in canonical form; the filter path must exist.

        Ties keep insertion order.
        """
        target = canonical_repo(repo, strict=True) if repo is not None else None

        with self._locked(exclusive=False) as handle:
            records = self._read_records(handle)

        if target is not None:
            canonical: dict[str, str] = {}
            selected = []
            for r in records:
                if r.repo not in canonical:
                    canonical[r.repo] = canonical_repo(r.repo)
                if canonical[r.repo] == target:
                    selected.append(r)
            records = selected

        return sorted(records, key=lambda r: r.score, reverse=True)

    def top(self, repo: Optional[PathLike] = None, limit: Optional[int] = None) -> list[ScoreRecord]:
        """First ``limit`` records of ``query(repo)``."""
        records = self.query(repo)
        return records if limit is None else records[:limit]

    # ── file access ───────────────────────────────────────────────

    @contextmanager
    def _locked(self, exclusive: bool) -> Iterator[IO[str]]:
        """Open the ledger and hold a lock for the duration of the block.

        The lock is released on every exit path.
        """
        try:
            handle = open(self.path, "r+", encoding="utf-8")
        except OSError as e:
            raise StorageUnavailableError(f"could not open ledger: {e}", self.path) from e

        try:
            try:
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH)
            except OSError as e:
                raise StorageUnavailableError(f"could not lock ledger: {e}", self.path) from e
            try:
                yield handle
            finally:
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
        finally:
            handle.close()

    def _read_records(self, handle: IO[str]) -> list[ScoreRecord]:
        """Parse the full file. Zero bytes is an empty ledger."""
        try:
            handle.seek(0)
            text = handle.read()
        except (OSError, ValueError) as e:
            raise StorageUnavailableError(f"could not read ledger: {e}", self.path) from e

        if not text:
            return []

        try:
            data = json.loads(text)
            if not isinstance(data, list):
                raise ValueError("ledger must hold a JSON array")
            return [ScoreRecord.from_dict(item) for item in data]
        except ValueError as e:
            logger.warning("Ledger %s is corrupt: %s", self.path, e)
            raise StorageUnavailableError(f"could not parse ledger: {e}", self.path) from e
