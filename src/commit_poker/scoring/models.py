"""Data models for hash scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from ..math import Rarity


class RuleKind(Enum):
    """Scoring rule families, in evaluation order."""

    REPEATED_SYMBOL = "repeated_symbol"
    FLUSH = "flush"
    STRAIGHT = "straight"


@dataclass(frozen=True)
class PatternMatch:
    """Evidence that one scoring rule applies to a hash.

    Attributes:
        kind: Rule family that produced the match
        name: Short label, e.g. "6 pairs!" or "Partial straight"
        description: Detail string, e.g. "2 as, 2 bs"
        probability: Exact occurrence probability; above 1 for short
            patterns in long hashes, where the counting formulas over-count
        positions: Index groups into the hash, used only for highlighting
    """

    kind: RuleKind
    name: str
    description: str
    probability: Fraction
    positions: tuple[tuple[int, ...], ...]

    @property
    def points(self) -> int:
        return Rarity.points(self.probability)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "description": self.description,
            "probability": float(self.probability),
            "points": self.points,
            "positions": [list(group) for group in self.positions],
        }


@dataclass(frozen=True)
class ScoringResult:
    """All matches for one hash, ranked by points descending."""

    hash: str
    matches: tuple[PatternMatch, ...]

    @property
    def total_points(self) -> int:
        return sum(m.points for m in self.matches)

    @property
    def rule_names(self) -> tuple[str, ...]:
        return tuple(m.name for m in self.matches)

    def to_dict(self) -> dict:
        return {
            "hash": self.hash,
            "total_points": self.total_points,
            "matches": [m.to_dict() for m in self.matches],
        }
