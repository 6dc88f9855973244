"""High-score ledger: durable, lock-guarded store of score records."""

from .models import ScoreRecord, is_new_high_score
from .paths import default_data_dir, default_ledger_path
from .store import HighScoreLedger, canonical_repo

__all__ = [
    "HighScoreLedger",
    "ScoreRecord",
    "canonical_repo",
    "default_data_dir",
    "default_ledger_path",
    "is_new_high_score",
]
