"""Commit source: create commits and read them back through git."""

from .client import GitClient
from .models import CommitInfo

__all__ = ["CommitInfo", "GitClient"]
