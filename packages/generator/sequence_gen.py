"""
Sequence Generator.

Strategy:
  - Pick a difficulty tier (hard with probability policy.hard_probability).
  - Draw a random pool word of at least the tier's length, then three
    strictly increasing positions in it; their letters form the candidate.
  - Reject candidates ending in a forbidden letter, and candidates that
    appear as a literal substring of the source word (the player should
    have to pad the letters, not just spell a chunk of one word).
  - Estimate support: how many pool words contain the candidate as a
    subsequence. Large pools are sampled with replacement (sample_size
    draws) instead of scanned; counts are memoized per sequence.
  - Return the first candidate whose support meets the tier's minimum.
  - After max_attempts misses (or with nothing to draw from) fall back to
    three random distinct letters.

Notes:
  - Deterministic for a given pool when the random source is seeded.
  - Never raises for data problems: an empty pool goes straight to the
    fallback, which always terminates.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from packages.engine.sequence import SEQUENCE_LENGTH, is_contiguous, is_sequential
from packages.lexicon.index import DictionaryIndex

from .base import DEFAULT_POLICY, GeneratorPolicy, RandomSource, Tier, default_random
from .cache import SupportCache

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Generation:
    """One generate() outcome, with enough detail for experiments."""
    sequence: str
    tier: str
    attempts: int            # candidate draws made before returning
    support: Optional[int]   # None for the fallback
    fallback: bool


class SequenceGenerator:
    def __init__(self, index: DictionaryIndex, *,
                 policy: GeneratorPolicy = DEFAULT_POLICY,
                 rng: RandomSource | None = None,
                 cache: SupportCache | None = None) -> None:
        self.index = index
        self.policy = policy
        self.rng = rng if rng is not None else default_random()
        self.cache = cache if cache is not None else SupportCache()

    # ---- candidate drawing ----
    def draw_positions(self, n: int) -> Tuple[int, int, int]:
        """
        Three strictly increasing indices into a word of length n (n >= 3),
        each leaving room for the ones after it.
        """
        i = self.rng.randrange(n - 2)
        j = i + 1 + self.rng.randrange(n - i - 2)
        k = j + 1 + self.rng.randrange(n - j - 1)
        return i, j, k

    def draw_candidate(self, words: Sequence[str]) -> Tuple[str, str]:
        """Return (source_word, candidate_sequence)."""
        word = words[self.rng.randrange(len(words))]
        i, j, k = self.draw_positions(len(word))
        return word, word[i] + word[j] + word[k]

    # ---- support estimation ----
    def _sample_count(self, sequence: str, words: Sequence[str]) -> int:
        n = len(words)
        if n > self.policy.sample_size:
            sample = [words[self.rng.randrange(n)] for _ in range(self.policy.sample_size)]
        else:
            sample = words
        return sum(1 for w in sample if is_sequential(w, sequence))

    def estimate_support(self, sequence: str, tier: Tier) -> int:
        """
        Support count for `sequence` among words eligible for `tier`.

        Cached per literal sequence: a second call returns the stored count
        without drawing from the random source again.
        """
        key = sequence.upper()
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        count = self._sample_count(key, self._eligible(tier))
        log.debug("support %s = %d (tier=%s)", key, count, tier.name)
        return self.cache.put(key, count)

    def _eligible(self, tier: Tier) -> Tuple[str, ...]:
        return self.index.words_at_least(max(tier.min_word_length, SEQUENCE_LENGTH))

    # ---- generation ----
    def fallback_sequence(self) -> str:
        """Three distinct random letters; the last is never forbidden."""
        alphabet = self.policy.alphabet.upper()
        forbidden = self.policy.forbidden_third_letters
        letters = ""
        while len(letters) < SEQUENCE_LENGTH:
            ch = alphabet[self.rng.randrange(len(alphabet))]
            if len(letters) == SEQUENCE_LENGTH - 1 and ch in forbidden:
                continue
            if ch not in letters:
                letters += ch
        return letters

    def generate_detailed(self) -> Generation:
        policy = self.policy
        tier = policy.choose_tier(self.rng)
        words = self._eligible(tier)

        attempts = 0
        if words:
            for attempts in range(1, policy.max_attempts + 1):
                word, seq = self.draw_candidate(words)
                if seq[-1] in policy.forbidden_third_letters:
                    continue
                if is_contiguous(word, seq):
                    continue

                cached = self.cache.get(seq)
                if cached is not None:
                    if cached >= tier.min_support:
                        return Generation(seq, tier.name, attempts, cached, False)
                    continue

                support = self.estimate_support(seq, tier)
                if support >= tier.min_support:
                    return Generation(seq, tier.name, attempts, support, False)

        seq = self.fallback_sequence()
        log.info("no %s sequence after %d attempt(s); falling back to %s",
                 tier.name, attempts, seq)
        return Generation(seq, tier.name, attempts, None, True)

    def generate(self) -> str:
        """The round's 3-letter sequence."""
        return self.generate_detailed().sequence

    async def agenerate(self) -> str:
        """generate() off the event loop; sampling can take a while on big pools."""
        return await asyncio.to_thread(self.generate)
