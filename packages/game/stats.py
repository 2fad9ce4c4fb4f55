"""
Persistent round statistics.

One versioned record, updated at the end of every round:
  - games played / won, current and best streak
  - top-5 scores
  - mistake histogram (games with 0..5 mistakes)
  - top-5 longest distinct words (ties: most recent first)
  - last_round highlights so a stats view can mark what is new

from_dict() accepts partial or older records (including the camelCase keys
the browser version stored) and fills in defaults, so schema changes never
break loading.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List

from .round import RoundResult

SCHEMA_VERSION = 1
HISTORY_SIZE = 5
MISTAKE_BUCKETS = 6  # games with 0, 1, 2, 3, 4, 5 mistakes

_CAMEL_KEYS = {
    "gamesPlayed": "games_played",
    "gamesWon": "games_won",
    "currentStreak": "current_streak",
    "maxStreak": "max_streak",
    "highestScores": "highest_scores",
    "longestWords": "longest_words",
}


def _as_int(v) -> int:
    try:
        return max(0, int(v or 0))
    except (TypeError, ValueError):
        return 0


@dataclass
class LastRound:
    score: int = 0
    mistakes: int = 0
    words: List[Dict] = field(default_factory=list)  # [{"word", "length"}]


@dataclass
class Statistics:
    version: int = SCHEMA_VERSION
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    highest_scores: List[int] = field(default_factory=list)
    mistakes: List[int] = field(default_factory=lambda: [0] * MISTAKE_BUCKETS)
    longest_words: List[Dict] = field(default_factory=list)  # [{"word", "length"}]
    last_round: LastRound = field(default_factory=LastRound)

    # ---- persistence ----
    @classmethod
    def from_dict(cls, data: Dict | None) -> "Statistics":
        if not isinstance(data, dict):
            return cls()
        d = {_CAMEL_KEYS.get(k, k): v for k, v in data.items()}

        # Positional histogram: a bad bucket reads as 0, it is not dropped.
        raw = d.get("mistakes") if isinstance(d.get("mistakes"), list) else []
        mistakes = ([_as_int(x) for x in raw] + [0] * MISTAKE_BUCKETS)[:MISTAKE_BUCKETS]

        scores = sorted((int(s) for s in (d.get("highest_scores") or [])
                         if isinstance(s, (int, float))), reverse=True)[:HISTORY_SIZE]

        words = [{"word": str(w["word"]), "length": int(w["length"])}
                 for w in (d.get("longest_words") or [])
                 if isinstance(w, dict) and "word" in w and isinstance(w.get("length"), int)]

        lr = d.get("last_round") if isinstance(d.get("last_round"), dict) else {}
        last = LastRound(
            score=_as_int(lr.get("score")),
            mistakes=_as_int(lr.get("mistakes")),
            words=[w for w in (lr.get("words") or []) if isinstance(w, dict)],
        )

        return cls(
            version=SCHEMA_VERSION,
            games_played=_as_int(d.get("games_played")),
            games_won=_as_int(d.get("games_won")),
            current_streak=_as_int(d.get("current_streak")),
            max_streak=_as_int(d.get("max_streak")),
            highest_scores=scores,
            mistakes=mistakes,
            longest_words=words[:HISTORY_SIZE],
            last_round=last,
        )

    def to_dict(self) -> Dict:
        return asdict(self)

    # ---- updates ----
    @property
    def win_rate(self) -> float:
        """Percentage of played rounds with at least one valid word."""
        if self.games_played == 0:
            return 0.0
        return 100.0 * self.games_won / self.games_played

    def record_round(self, result: RoundResult) -> None:
        valid = result.valid_words

        self.games_played += 1
        if valid:
            self.games_won += 1
            self.current_streak += 1
            self.max_streak = max(self.max_streak, self.current_streak)
        else:
            self.current_streak = 0

        if result.score > 0:
            self.highest_scores = sorted(self.highest_scores + [result.score],
                                         reverse=True)[:HISTORY_SIZE]

        mistakes = result.mistakes
        if 0 <= mistakes < len(self.mistakes):
            self.mistakes[mistakes] += 1

        # Newest first, so a stable length sort keeps recent words ahead on ties.
        known = {w["word"] for w in self.longest_words}
        fresh: List[Dict] = []
        for g in reversed(valid):
            if g.word not in known:
                known.add(g.word)
                fresh.append({"word": g.word, "length": g.length})
        merged = fresh + self.longest_words
        merged.sort(key=lambda w: -w["length"])
        self.longest_words = merged[:HISTORY_SIZE]

        self.last_round = LastRound(
            score=result.score,
            mistakes=mistakes,
            words=[{"word": g.word, "length": g.length} for g in valid],
        )

    def abandon_round(self) -> None:
        """A started round was thrown away before it ended."""
        self.current_streak = 0
