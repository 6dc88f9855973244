"""Score a hash by running every detector and ranking the matches."""

from __future__ import annotations

import re

from .detectors import detect
from .models import PatternMatch, RuleKind, ScoringResult

_HEX_RE = re.compile(r"[0-9a-f]+")


def is_valid_hash(text: str) -> bool:
    """True for a non-empty lower-case hexadecimal string."""
    return _HEX_RE.fullmatch(text) is not None


def score_hash(hash_: str) -> ScoringResult:
    """Compute the ``ScoringResult`` for ``hash_``.

    The caller is responsible for passing a valid hash (see
    ``is_valid_hash``). Matches are sorted by points descending; the sort
    is stable, so detectors keep their evaluation order on ties.
    """
    matches: list[PatternMatch] = []
    for kind in RuleKind:
        match = detect(kind, hash_)
        if match is not None:
            matches.append(match)

    matches.sort(key=lambda m: m.points, reverse=True)
    return ScoringResult(hash=hash_, matches=tuple(matches))
