"""
Subsequence checks for a round's letter sequence.

A word "contains" a sequence when the sequence's letters appear in the word
in the same relative order, not necessarily next to each other:

    is_sequential("PLAIN", "LIN") -> True    (L.I.N with A between)
    is_sequential("LINK",  "LIN") -> True    (consecutive is fine)
    is_sequential("NAIL",  "LIN") -> False   (letters out of order)

Greedy earliest matching is enough: every matched letter advances the target
pointer by exactly one, so taking the first occurrence never loses a match.
"""

from __future__ import annotations

# Every round's sequence has exactly this many letters.
SEQUENCE_LENGTH = 3


def is_sequential(word: str, letters: str) -> bool:
    """
    True iff `letters` is a subsequence of `word` (case-insensitive).

    Single left-to-right scan over `word`. An empty `letters` matches
    any word.
    """
    target = letters.upper()
    if not target:
        return True

    idx = 0
    for ch in word.upper():
        if ch == target[idx]:
            idx += 1
            if idx == len(target):
                return True
    return False


def is_contiguous(word: str, letters: str) -> bool:
    """True iff `letters` occurs as a literal substring of `word` (case-insensitive)."""
    return letters.upper() in word.upper()
