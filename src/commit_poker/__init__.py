"""
Commit Poker - score commit hashes like poker hands.

Rare patterns in a commit's short hash (pairs, flushes, straights) earn
points in inverse proportion to their probability, and a per-repository
high-score ledger tells you when a commit beats your record.
"""

__version__ = "0.3.0"

from .ledger import HighScoreLedger, ScoreRecord
from .scoring import PatternMatch, RuleKind, ScoringResult, score_hash

__all__ = [
    "score_hash",
    "ScoringResult",
    "PatternMatch",
    "RuleKind",
    "HighScoreLedger",
    "ScoreRecord",
]
