"""
Points for an accepted guess.

  - base  : one point per letter of the word
  - bonus : TIME_BONUS extra points when the guess lands within
            TIME_BONUS_THRESHOLD seconds of the round starting

Invalid guesses score nothing; the round never calls this for them.
"""

from typing import Tuple

TIME_BONUS_THRESHOLD = 10.0  # seconds since the round began
TIME_BONUS = 3


def score_guess(word: str, elapsed: float) -> Tuple[int, int]:
    """
    Return (base, bonus) for an accepted `word` submitted `elapsed` seconds
    into the round.

    Examples:
      score_guess("plain", 4.2)  -> (5, 3)
      score_guess("plain", 12.0) -> (5, 0)
    """
    base = len(word.strip())
    bonus = TIME_BONUS if elapsed <= TIME_BONUS_THRESHOLD else 0
    return base, bonus
