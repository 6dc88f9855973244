"""Pattern detectors over a hexadecimal hash.

Each detector is a pure function returning a ``PatternMatch`` or ``None``.
The rule set is closed: ``DETECTORS`` maps every ``RuleKind`` to its
function and ``detect`` dispatches on the kind.

Alphabet: 16 symbols, 0-9 and a-f. Probabilities are exact
fractions over the 16^n possible hashes of length n.
"""

from __future__ import annotations

import string
from collections import Counter
from typing import Callable, Optional

from ..math import Combinatorics, Rarity
from .models import PatternMatch, RuleKind

ALPHABET_SIZE = 16
LETTER_FLUSH_WEIGHT = 10
DIGIT_FLUSH_WEIGHT = 6

# Shortest run reported as a (partial) straight.
MIN_STRAIGHT = 4

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


def repeated_symbols(hash_: str) -> Optional[PatternMatch]:
    """N of a kind, pairs, and full house.

    The probability is C(n, c1) * C(n, c2) * ... * 15^(n - sum(c)) / 16^n.
    The 15^k term for the remaining positions is an approximation when
    several groups interact; it is kept unchanged so that scores recorded
    in existing ledgers remain comparable.
    """
    counts = Counter(hash_)
    groups = sorted((symbol, count) for symbol, count in counts.items() if count > 1)
    if not groups:
        return None

    group_counts = [count for _, count in groups]
    first = group_counts[0]
    if len(groups) == 1:
        name = f"{first} of a kind"
    elif all(count == 2 for count in group_counts):
        name = f"{len(groups)} pairs!"
    elif all(count == first for count in group_counts):
        name = f"{len(groups)} x {first} of a kind!"
    else:
        name = "FULL HOUSE!!"

    description = ", ".join(f"{count} {symbol}s" for symbol, count in groups)

    n = len(hash_)
    numerator = 1
    for count in group_counts:
        numerator *= Combinatorics.binomial(n, count)
    numerator *= (ALPHABET_SIZE - 1) ** (n - sum(group_counts))
    probability = Rarity.probability(numerator, ALPHABET_SIZE**n)

    positions = tuple(
        tuple(i for i, c in enumerate(hash_) if c == symbol) for symbol, _ in groups
    )

    return PatternMatch(
        kind=RuleKind.REPEATED_SYMBOL,
        name=name,
        description=description,
        probability=probability,
        positions=positions,
    )


def flush(hash_: str) -> Optional[PatternMatch]:
    """Every symbol is a letter, or every symbol is a digit.

    Letter flushes are weighted (10/16)^n and digit flushes (6/16)^n; these
    are the weights existing ledgers were scored with.
    """
    if all(c in _LETTERS for c in hash_):
        description = "all letters"
        weight = LETTER_FLUSH_WEIGHT
    elif all(c in _DIGITS for c in hash_):
        description = "all numbers"
        weight = DIGIT_FLUSH_WEIGHT
    else:
        return None

    n = len(hash_)
    probability = Rarity.probability(weight**n, ALPHABET_SIZE**n)

    return PatternMatch(
        kind=RuleKind.FLUSH,
        name="Flush",
        description=description,
        probability=probability,
        positions=(tuple(range(n)),),
    )


def symbol_rank(symbol: str) -> int:
    """Rank in the alphabet's total order: 0-9, then a-f as 10-15."""
    if symbol in _DIGITS:
        return int(symbol)
    return ord(symbol.lower()) - ord("a") + 10


def longest_run(hash_: str) -> str:
    """Longest run of strictly consecutive ranks among the sorted symbols.

    Repeated symbols break a run. On equal lengths the first run wins.
    """
    ordered = sorted(hash_, key=symbol_rank)
    if not ordered:
        return ""

    best = ordered[:1]
    current = ordered[:1]
    for previous, symbol in zip(ordered, ordered[1:]):
        if symbol_rank(symbol) == symbol_rank(previous) + 1:
            current.append(symbol)
        else:
            if len(current) > len(best):
                best = current
            current = [symbol]
    if len(current) > len(best):
        best = current

    return "".join(best)


def straight(hash_: str) -> Optional[PatternMatch]:
    """Longest run of consecutive symbols, of at least ``MIN_STRAIGHT``."""
    run = longest_run(hash_)
    if len(run) < MIN_STRAIGHT:
        return None

    n = len(hash_)
    r = len(run)
    # Run placement * free positions * start ranks. A run covering all 16
    # symbols would leave no start rank, so that factor is floored at 1.
    numerator = (
        Combinatorics.permutations(n, r)
        * ALPHABET_SIZE ** (n - r)
        * max(ALPHABET_SIZE - r, 1)
    )
    probability = Rarity.probability(numerator, ALPHABET_SIZE**n)

    return PatternMatch(
        kind=RuleKind.STRAIGHT,
        name="Straight" if r == n else "Partial straight",
        description=run,
        probability=probability,
        positions=(tuple(hash_.index(symbol) for symbol in run),),
    )


DETECTORS: dict[RuleKind, Callable[[str], Optional[PatternMatch]]] = {
    RuleKind.REPEATED_SYMBOL: repeated_symbols,
    RuleKind.FLUSH: flush,
    RuleKind.STRAIGHT: straight,
}


def detect(kind: RuleKind, hash_: str) -> Optional[PatternMatch]:
    """Evaluate a single rule family against ``hash_``."""
    return DETECTORS[kind](hash_)
