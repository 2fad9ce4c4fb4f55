from .base import DEFAULT_POLICY, EASY, HARD, GeneratorPolicy, RandomSource, Tier
from .cache import SupportCache
from .sequence_gen import Generation, SequenceGenerator

__all__ = ["DEFAULT_POLICY", "EASY", "HARD", "GeneratorPolicy", "RandomSource", "Tier",
           "SupportCache", "Generation", "SequenceGenerator"]
