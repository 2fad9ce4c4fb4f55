"""
Batch generation harness.

- run_case:  generate one round's sequence and describe it.
- run_batch: generate many rounds back-to-back with one generator, so the
             support cache warms up exactly as it would over a long session.
- summarize: aggregate a batch (support spread, fallback rate, tier mix).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import time
from collections import Counter
from typing import Callable, Dict, List

import numpy as np

from packages.generator import SequenceGenerator

# Example answers stored per case (what a player would be shown on a loss).
EXAMPLES_PER_CASE = 2


def run_case(generator: SequenceGenerator) -> Dict:
    """
    Generate one sequence and time it.

    Returns:
        dict with keys:
            sequence, tier, attempts, support, fallback, time_ms,
            examples (up to EXAMPLES_PER_CASE shortest answers from the pool)
    """
    t0 = time.perf_counter_ns()
    g = generator.generate_detailed()
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "sequence": g.sequence,
        "tier": g.tier,
        "attempts": g.attempts,
        "support": g.support,
        "fallback": g.fallback,
        "time_ms": dt,
        "examples": generator.index.find_example_answers(g.sequence, EXAMPLES_PER_CASE),
    }


def run_batch(
        generator: SequenceGenerator,
        rounds: int,
        *,
        on_case: Callable[[int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Run `rounds` generations in sequence. `on_case(idx, result)` is called
    after each one (progress reporting).
    """
    if rounds < 0:
        raise ValueError(f"rounds must be >= 0; got {rounds}")

    out: List[Dict] = []
    for idx in range(1, rounds + 1):
        r = run_case(generator)
        r["round"] = idx
        out.append(r)
        if on_case is not None:
            on_case(idx, r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch into plain floats/ints (JSON-safe).

    Support statistics only cover non-fallback cases; fallbacks have no
    measured support.
    """
    n = len(results)
    if n == 0:
        return {"rounds": 0, "fallback_rate": 0.0, "tiers": {},
                "support_mean": None, "support_median": None, "support_p90": None,
                "time_ms_mean": None, "attempts_mean": None}

    support = np.asarray([r["support"] for r in results if r["support"] is not None],
                         dtype=float)
    times = np.asarray([r["time_ms"] for r in results], dtype=float)
    attempts = np.asarray([r["attempts"] for r in results], dtype=float)
    fallbacks = sum(1 for r in results if r["fallback"])

    def _stat(fn, arr):
        return float(fn(arr)) if arr.size else None

    return {
        "rounds": n,
        "fallback_rate": fallbacks / n,
        "tiers": dict(Counter(r["tier"] for r in results)),
        "support_mean": _stat(np.mean, support),
        "support_median": _stat(np.median, support),
        "support_p90": _stat(lambda a: np.percentile(a, 90), support),
        "time_ms_mean": float(times.mean()),
        "attempts_mean": float(attempts.mean()),
    }
