"""
One round of play.

- A round owns its sequence, a fixed budget of guesses and the score.
- submit() runs the validity gate and records a Guess for every attempt
  that reaches it (valid or not). Blank input, repeats and submissions
  while another check is in flight are refused without using a guess.
- end_early() pads the remaining slots with "unused" placeholders.

The round is UI-agnostic: a terminal loop, a web handler or a test can
drive it the same way.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from packages.engine.scoring import score_guess
from packages.engine.validation import DENYLIST, Lookup, Verdict, check_word

log = logging.getLogger(__name__)

GUESSES_PER_ROUND = 5
UNUSED_WORD = "unused"


@dataclass(frozen=True)
class Guess:
    word: str
    length: Optional[int]   # None for invalid or unused slots
    bonus: int = 0
    valid: bool = False

    @classmethod
    def unused(cls) -> "Guess":
        return cls(UNUSED_WORD, None, 0, False)


@dataclass(frozen=True)
class SubmitResult:
    accepted: bool
    message: str
    guess: Optional[Guess] = None   # None when no guess slot was used
    points: int = 0


@dataclass
class RoundResult:
    sequence: str
    guesses: List[Guess]
    score: int
    manually_ended: bool
    first_answer_time: Optional[float]

    @property
    def valid_words(self) -> List[Guess]:
        return [g for g in self.guesses if g.valid]

    @property
    def mistakes(self) -> int:
        return sum(1 for g in self.guesses if not g.valid)


class Round:
    def __init__(self, sequence: str, *, lookup: Lookup,
                 guesses: int = GUESSES_PER_ROUND,
                 clock: Callable[[], float] = time.perf_counter,
                 denylist=DENYLIST) -> None:
        self.sequence = sequence.upper()
        self.lookup = lookup
        self.max_guesses = int(guesses)
        self.clock = clock
        self.denylist = denylist

        self.guesses: List[Guess] = []
        self.score = 0
        self.started_at: Optional[float] = None
        self.first_answer_time: Optional[float] = None
        self.manually_ended = False
        self._pending = False

    # ---- state ----
    @property
    def started(self) -> bool:
        return self.started_at is not None

    @property
    def guesses_remaining(self) -> int:
        return self.max_guesses - len(self.guesses)

    @property
    def over(self) -> bool:
        return self.manually_ended or self.guesses_remaining <= 0

    @property
    def in_progress(self) -> bool:
        return self.started and not self.over

    def elapsed(self) -> float:
        return 0.0 if self.started_at is None else self.clock() - self.started_at

    def begin(self) -> None:
        if self.started_at is None:
            self.started_at = self.clock()

    def _already_guessed(self, word: str) -> bool:
        return any(g.word == word for g in self.guesses if g.word != UNUSED_WORD)

    # ---- actions ----
    async def submit(self, text: str) -> SubmitResult:
        if not self.started:
            return SubmitResult(False, "Round not started")
        if self.over:
            return SubmitResult(False, "Round is over")
        if self._pending:
            return SubmitResult(False, "Still checking the previous word")

        word = text.strip().lower()
        if not word:
            return SubmitResult(False, "Please enter a word")
        if self._already_guessed(word):
            return SubmitResult(False, "Already guessed")

        elapsed = self.elapsed()
        self._pending = True
        try:
            verdict = await check_word(word, self.sequence, self.lookup,
                                       denylist=self.denylist)
        finally:
            self._pending = False

        # end_early() may have run while the lookup was suspended.
        if self.over:
            return SubmitResult(False, "Round is over")

        if verdict is not Verdict.VALID:
            guess = Guess(word, None, 0, False)
            self.guesses.append(guess)
            if verdict is Verdict.OUT_OF_ORDER:
                msg = f"Word must contain '{self.sequence}' in order"
            else:
                msg = "Not a valid English word"
            log.debug("rejected %r: %s", word, verdict.value)
            return SubmitResult(False, msg, guess)

        base, bonus = score_guess(word, elapsed)
        guess = Guess(word, base, bonus, True)
        self.guesses.append(guess)
        self.score += base + bonus
        if self.first_answer_time is None:
            self.first_answer_time = elapsed
        return SubmitResult(True, f"+{base}" + (f" +{bonus} time bonus" if bonus else ""),
                            guess, base + bonus)

    def end_early(self) -> RoundResult:
        """Stop now; every unused slot counts as a mistake."""
        if not self.over:
            self.guesses.extend(Guess.unused() for _ in range(self.guesses_remaining))
            self.manually_ended = True
        return self.result()

    def result(self) -> RoundResult:
        return RoundResult(
            sequence=self.sequence,
            guesses=list(self.guesses),
            score=self.score,
            manually_ended=self.manually_ended,
            first_answer_time=self.first_answer_time,
        )
