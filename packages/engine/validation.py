"""
Validity gate for a submitted guess.

A guess is accepted iff, in this order:
  - it has no hyphen
  - it is not on the profanity denylist (exact, case-insensitive match)
  - it contains the round's sequence in order (see sequence.is_sequential)
  - the dictionary-lookup collaborator recognizes it as an English word

The first three checks are local and cheap; the lookup may hit the network,
so it only runs once everything else has passed. A lookup that raises is
treated the same as one that says "no": the game loop always gets a verdict.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable, Iterable, Optional

from .sequence import is_sequential

log = logging.getLogger(__name__)

# async (word) -> bool; may suspend on I/O, may raise on failure.
Lookup = Callable[[str], Awaitable[bool]]

DENYLIST = frozenset({
    "fuck", "shit", "bitch", "ass", "damn", "hell", "crap", "piss", "cock", "dick",
    "pussy", "cunt", "fucking", "shitting", "bitching", "asshole", "damned",
    "hellish", "crappy", "pissing", "fucker", "shitty", "bitchy", "asshat",
    "damnit", "hellfire", "crapper", "pisser", "motherfucker", "bullshit",
    "horseshit", "dumbass", "jackass", "smartass", "badass", "fuckin", "bitchin",
    "asswipe", "pissy",
})


class Verdict(str, Enum):
    VALID = "valid"
    HYPHENATED = "hyphenated"
    PROFANE = "profane"
    OUT_OF_ORDER = "out_of_order"
    UNKNOWN_WORD = "unknown_word"


def precheck(word: str, sequence: str,
             denylist: Iterable[str] = DENYLIST) -> Optional[Verdict]:
    """
    Run the local checks only.

    Returns the failing Verdict, or None when the word may go on to the
    dictionary lookup.
    """
    w = word.strip()
    if "-" in w:
        return Verdict.HYPHENATED
    if w.lower() in denylist:
        return Verdict.PROFANE
    if not is_sequential(w, sequence):
        return Verdict.OUT_OF_ORDER
    return None


async def check_word(word: str, sequence: str, lookup: Lookup, *,
                     denylist: Iterable[str] = DENYLIST) -> Verdict:
    """
    Full gate: local checks, then the (possibly remote) lookup.

    Args:
      word     : raw guess as typed
      sequence : the round's 3-letter sequence
      lookup   : async collaborator answering "is this an English word?"
      denylist : lowercase words that are always refused

    Returns:
      Verdict.VALID or the reason the word was refused.
    """
    failed = precheck(word, sequence, denylist)
    if failed is not None:
        return failed

    w = word.strip()
    try:
        known = await lookup(w)
    except Exception as e:
        log.warning("dictionary lookup for %r failed: %s", w, e)
        return Verdict.UNKNOWN_WORD
    return Verdict.VALID if known else Verdict.UNKNOWN_WORD


async def is_valid_word(word: str, sequence: str, lookup: Lookup) -> bool:
    """Boolean view of check_word()."""
    return await check_word(word, sequence, lookup) is Verdict.VALID
