from .sequence import SEQUENCE_LENGTH, is_sequential, is_contiguous
from .scoring import TIME_BONUS, TIME_BONUS_THRESHOLD, score_guess
from .validation import DENYLIST, Verdict, check_word, is_valid_word, precheck

__all__ = ["SEQUENCE_LENGTH", "is_sequential", "is_contiguous",
           "TIME_BONUS", "TIME_BONUS_THRESHOLD", "score_guess",
           "DENYLIST", "Verdict", "check_word", "is_valid_word", "precheck"]
