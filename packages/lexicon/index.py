"""
Dictionary Index: the Candidate Pool every round draws from.

Given:
  - an unordered bag of raw words (any casing, any junk)

Produce:
  - an immutable, ordered pool of UPPERCASE alphabetic words of length >= 3
    whose uppercase form does not end in a common inflection suffix.

Dropping inflected forms (PLAYING, PLAYED, PLAYS, ...) keeps generated
sequences from collapsing onto trivial completions. The pool is built once
at startup and only queried afterwards.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from packages.engine.sequence import SEQUENCE_LENGTH, is_sequential

log = logging.getLogger(__name__)

# Suffixes tuned by playtesting; order does not matter.
EXCLUDED_SUFFIXES: Tuple[str, ...] = ("ING", "ED", "S", "ER", "EST", "LY", "ISH")
MIN_WORD_LENGTH = 3


def is_playable(word: object, *, min_length: int = MIN_WORD_LENGTH,
                suffixes: Sequence[str] = EXCLUDED_SUFFIXES) -> bool:
    """
    Inclusion predicate for the Candidate Pool.

    True iff `word` is a string of ASCII letters only, at least `min_length`
    long, and its uppercase form does not end with any of `suffixes`.
    """
    if not isinstance(word, str):
        return False
    if len(word) < min_length or not (word.isascii() and word.isalpha()):
        return False
    return not word.upper().endswith(tuple(s.upper() for s in suffixes))


class DictionaryIndex:
    """Filtered, normalized word pool with subsequence queries."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        # Callers normally go through build(); this trusts its input.
        self._pool: Tuple[str, ...] = tuple(words)
        self._words = frozenset(self._pool)
        self._by_min_length: Dict[int, Tuple[str, ...]] = {}

    @classmethod
    def build(cls, raw: Iterable[object] | None, *,
              min_length: int = MIN_WORD_LENGTH,
              suffixes: Sequence[str] = EXCLUDED_SUFFIXES) -> "DictionaryIndex":
        """
        Filter and normalize a raw word source into an index.

        Args:
          raw        : iterable of raw tokens; None or junk yields an empty pool
          min_length : shortest word kept
          suffixes   : uppercase suffixes that exclude a word

        Returns:
          DictionaryIndex whose pool keeps source order, first occurrence
          wins for duplicates.
        """
        seen = set()
        pool: List[str] = []
        for w in raw or ():
            if not is_playable(w, min_length=min_length, suffixes=suffixes):
                continue
            up = w.upper()
            if up in seen:
                continue
            seen.add(up)
            pool.append(up)

        log.info("dictionary index built: %d playable words", len(pool))
        return cls(pool)

    @property
    def pool(self) -> Tuple[str, ...]:
        return self._pool

    def __len__(self) -> int:
        return len(self._pool)

    def __iter__(self) -> Iterator[str]:
        return iter(self._pool)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._words

    def words_at_least(self, length: int) -> Tuple[str, ...]:
        """Pool words with len >= `length` (memoized per length)."""
        hit = self._by_min_length.get(length)
        if hit is None:
            hit = tuple(w for w in self._pool if len(w) >= length)
            self._by_min_length[length] = hit
        return hit

    def find_example_answers(self, sequence: str, max_results: int = 2) -> List[str]:
        """
        Shortest pool words containing `sequence` as a subsequence.

        Sorted by length, then alphabetically; at most `max_results`.
        Anything other than a 3-letter sequence yields [].

        Example:
          pool ["PLAIN", "LINK", "NAIL"], "LIN", 2 -> ["LINK", "PLAIN"]
        """
        if not isinstance(sequence, str) or len(sequence) != SEQUENCE_LENGTH:
            return []
        if max_results <= 0:
            return []
        matches = [w for w in self._pool if is_sequential(w, sequence)]
        matches.sort(key=lambda w: (len(w), w))
        return matches[:max_results]
