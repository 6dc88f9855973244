"""Pattern scoring for commit hashes."""

from .detectors import DETECTORS, MIN_STRAIGHT, detect
from .engine import is_valid_hash, score_hash
from .models import PatternMatch, RuleKind, ScoringResult

__all__ = [
    "DETECTORS",
    "MIN_STRAIGHT",
    "PatternMatch",
    "RuleKind",
    "ScoringResult",
    "detect",
    "is_valid_hash",
    "score_hash",
]
