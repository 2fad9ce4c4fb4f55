from __future__ import annotations

import random
import string
from dataclasses import dataclass, field
from typing import FrozenSet, Protocol


class RandomSource(Protocol):
    """
    What the generator needs from a random number generator.
    random.Random satisfies it; tests plug in a scripted source.
    """

    def randrange(self, n: int) -> int: ...

    def random(self) -> float: ...


def default_random(seed: int | None = None) -> RandomSource:
    return random.Random(seed)


# ---- Difficulty tiers ----
@dataclass(frozen=True)
class Tier:
    name: str
    min_support: int       # sampled pool words that must contain the sequence
    min_word_length: int   # source words shorter than this are never drawn


HARD = Tier("hard", min_support=3, min_word_length=8)
EASY = Tier("easy", min_support=5, min_word_length=4)


# ---- Generation policy (fixed per generator, never per call) ----
@dataclass(frozen=True)
class GeneratorPolicy:
    hard: Tier = HARD
    easy: Tier = EASY
    hard_probability: float = 0.75
    max_attempts: int = 1000
    sample_size: int = 10_000
    # Tuned by playtesting: avoids trivial plural/gerund/past endings.
    forbidden_third_letters: FrozenSet[str] = field(default_factory=lambda: frozenset("SGD"))
    alphabet: str = string.ascii_uppercase

    def __post_init__(self) -> None:
        if not 0.0 <= self.hard_probability <= 1.0:
            raise ValueError(f"hard_probability must be in [0, 1]; got {self.hard_probability}")
        if self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be > 0; got {self.max_attempts}")
        if self.sample_size <= 0:
            raise ValueError(f"sample_size must be > 0; got {self.sample_size}")
        for t in (self.hard, self.easy):
            if t.min_word_length < 3:
                raise ValueError(f"tier {t.name!r} min_word_length must be >= 3")
        # The fallback needs three distinct letters with a legal last one.
        letters = set(self.alphabet.upper())
        if len(letters - set(self.forbidden_third_letters)) < 3:
            raise ValueError("alphabet needs at least 3 letters outside forbidden_third_letters")

    def choose_tier(self, rng: RandomSource) -> Tier:
        return self.hard if rng.random() < self.hard_probability else self.easy


DEFAULT_POLICY = GeneratorPolicy()
