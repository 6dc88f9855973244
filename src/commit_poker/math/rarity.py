"""Probability to point-value conversion.

    points = ceil(100 / p)

A pattern that always occurs scores 100; rarer patterns score
proportionally more. The probability is kept as an exact fraction and
converted to float once, right before rounding, so historic scores stay
comparable.
"""

import math
from fractions import Fraction

BASE_POINTS = 100


class Rarity:
    """Exact rarity arithmetic."""

    @staticmethod
    def probability(numerator: int, denominator: int) -> Fraction:
        """
        Build an exact probability from a pattern count over all outcomes.

        The counting formulas over-count for long hashes with short
        patterns, so the ratio can exceed 1. It is returned unchanged;
        such matches score below 100 points.

        Raises:
            ValueError: If the ratio is not positive.
        """
        if denominator <= 0 or numerator <= 0:
            raise ValueError(f"probability must be positive, got {numerator}/{denominator}")
        return Fraction(numerator, denominator)

    @staticmethod
    def points(probability: Fraction) -> int:
        """
        Convert a positive probability into an integer point value.

        Falls back to the exact ceiling when the float quotient leaves the
        representable range.
        """
        if probability <= 0:
            raise ValueError("probability must be positive")

        as_float = float(probability)
        if as_float > 0.0:
            quotient = BASE_POINTS / as_float
            if math.isfinite(quotient):
                return math.ceil(quotient)

        exact = BASE_POINTS / probability
        return -(-exact.numerator // exact.denominator)
