"""Mathematical utilities for hash scoring."""

from .combinatorics import Combinatorics
from .rarity import BASE_POINTS, Rarity

__all__ = [
    "BASE_POINTS",
    "Combinatorics",
    "Rarity",
]
