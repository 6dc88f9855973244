"""Exact integer combinatorics for pattern probabilities.

Everything here stays in Python integers so hash lengths of 40 symbols and
beyond never lose precision before the final division.
"""

import math


class Combinatorics:
    """Counting helpers used by the pattern detectors."""

    @staticmethod
    def permutations(n: int, k: int) -> int:
        """
        Falling product n * (n - 1) * ... * (k + 1), i.e. n! / k!.

        Args:
            n: Upper bound of the product
            k: Lower bound (exclusive)

        Returns:
            1 when n == k

        Raises:
            ValueError: If either argument is negative or k > n
        """
        if n < 0 or k < 0:
            raise ValueError("permutations requires non-negative arguments")
        if k > n:
            raise ValueError(f"permutations requires k <= n, got n={n}, k={k}")
        return math.perm(n, n - k)

    @staticmethod
    def binomial(n: int, k: int) -> int:
        """Number of ways to choose k items from n, C(n, k)."""
        if n < 0 or k < 0:
            raise ValueError("binomial requires non-negative arguments")
        return math.comb(n, k)
