from .round import GUESSES_PER_ROUND, Guess, Round, RoundResult, SubmitResult
from .stats import Statistics
from .store import StatsStore

__all__ = ["GUESSES_PER_ROUND", "Guess", "Round", "RoundResult", "SubmitResult",
           "Statistics", "StatsStore"]
