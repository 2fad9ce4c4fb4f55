"""Shared fixtures: deterministic randomness, a controllable clock, stub lookups."""

from __future__ import annotations

import pytest


class ScriptedRandom:
    """
    Random source that replays fixed values. Running out of script is a
    test failure (IndexError), which is how tests prove nothing was drawn.
    """

    def __init__(self, ints=(), floats=()):
        self.ints = list(ints)
        self.floats = list(floats)

    def randrange(self, n: int) -> int:
        v = self.ints.pop(0)
        assert 0 <= v < n, f"scripted {v} outside range({n})"
        return v

    def random(self) -> float:
        return self.floats.pop(0)


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class CountingLookup:
    """Async lookup stub that records every word it is asked about."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.calls = []

    async def __call__(self, word: str) -> bool:
        self.calls.append(word)
        return self.answer


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def counting_lookup() -> CountingLookup:
    return CountingLookup()
