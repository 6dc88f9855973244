"""Score records persisted in the high-score ledger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..git.models import CommitInfo
from ..scoring.models import ScoringResult

_FIELDS = ("repo", "commit", "score", "date", "rules")


@dataclass(frozen=True)
class ScoreRecord:
    """One scored commit.

    Only the names of the matched rules are kept, not their detail.
    """

    repo: str
    commit: str
    score: int
    date: int  # unix seconds
    rules: tuple[str, ...] = ()

    @classmethod
    def from_result(cls, result: ScoringResult, commit: CommitInfo) -> ScoreRecord:
        return cls(
            repo=commit.repo,
            commit=commit.short_hash,
            score=result.total_points,
            date=commit.date,
            rules=result.rule_names,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "repo": self.repo,
            "commit": self.commit,
            "score": self.score,
            "date": self.date,
            "rules": list(self.rules),
        }

    @classmethod
    def from_dict(cls, data: Any) -> ScoreRecord:
        """Parse one stored record.

        Raises:
            ValueError: If a field is missing or has the wrong type. There is
                no schema version; any mismatch is a hard failure.
        """
        if not isinstance(data, dict):
            raise ValueError(f"score record must be an object, got {type(data).__name__}")
        missing = [name for name in _FIELDS if name not in data]
        if missing:
            raise ValueError(f"score record missing fields: {', '.join(missing)}")

        repo, commit, score, date, rules = (data[name] for name in _FIELDS)
        if not isinstance(repo, str) or not isinstance(commit, str):
            raise ValueError("score record 'repo' and 'commit' must be strings")
        for name, value in (("score", score), ("date", date)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"score record '{name}' must be an integer")
        if score < 0:
            raise ValueError("score record 'score' must be non-negative")
        if not isinstance(rules, list) or not all(isinstance(r, str) for r in rules):
            raise ValueError("score record 'rules' must be a list of strings")

        return cls(repo=repo, commit=commit, score=score, date=date, rules=tuple(rules))


def is_new_high_score(record: ScoreRecord, previous: Optional[ScoreRecord]) -> bool:
    """True when ``record`` strictly beats the previous top record."""
    return previous is not None and record.score > previous.score
