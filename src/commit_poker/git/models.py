"""Data models for the commit source."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CommitInfo:
    repo: str  # canonical working-tree path
    short_hash: str  # the symbols that get scored
    full_hash: str
    date: int  # unix seconds, committer time
    summary: Optional[str] = None
