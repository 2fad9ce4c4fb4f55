import asyncio
import random

import pytest

from packages.generator import EASY, HARD, GeneratorPolicy, SequenceGenerator, SupportCache, Tier
from packages.lexicon import DictionaryIndex

# LIN is contained (in order) by five of these six words.
POOL = ["PLAIN", "CLINK", "LINEN", "BLIND", "SPLINT", "LIMIT"]
EASY_ROLL = 0.9   # >= 0.75 -> easy tier
HARD_ROLL = 0.1


def _gen(rng, pool=POOL, **policy):
    return SequenceGenerator(DictionaryIndex.build(pool), rng=rng,
                             policy=GeneratorPolicy(**policy))


def test_generate_returns_first_supported_candidate(scripted):
    # PLAIN, positions 1,3,4 -> L I N
    rng = scripted(ints=[0, 1, 1, 0], floats=[EASY_ROLL])
    g = _gen(rng).generate_detailed()
    assert (g.sequence, g.tier, g.attempts, g.support, g.fallback) == ("LIN", "easy", 1, 5, False)


def test_forbidden_third_letter_is_redrawn(scripted):
    # BLIND, positions 0,1,4 -> B L D (D forbidden), then PLAIN -> LIN
    rng = scripted(ints=[3, 0, 0, 2, 0, 1, 1, 0], floats=[EASY_ROLL])
    g = _gen(rng).generate_detailed()
    assert g.sequence == "LIN" and g.attempts == 2


def test_contiguous_candidate_is_redrawn(scripted):
    # LINEN, positions 0,1,2 -> LIN spelled out literally, then PLAIN -> LIN
    rng = scripted(ints=[2, 0, 0, 0, 0, 1, 1, 0], floats=[EASY_ROLL])
    gen = _gen(rng)
    g = gen.generate_detailed()
    assert g.sequence == "LIN" and g.attempts == 2
    assert len(gen.cache) == 1  # rejected draws never reach the cache


def test_cached_support_below_threshold_is_skipped(scripted):
    rng = scripted(ints=[0, 1, 1, 0] + [1, 0, 2], floats=[EASY_ROLL])
    cache = SupportCache()
    cache.put("LIN", 1)
    gen = SequenceGenerator(DictionaryIndex.build(POOL), rng=rng, cache=cache,
                            policy=GeneratorPolicy(max_attempts=1))
    g = gen.generate_detailed()
    assert g.fallback is True and g.attempts == 1
    assert g.sequence == "BAC"


def test_cached_support_above_threshold_returns_without_sampling(scripted):
    rng = scripted(ints=[0, 1, 1, 0], floats=[HARD_ROLL])
    cache = SupportCache()
    cache.put("LIN", 7)
    gen = SequenceGenerator(DictionaryIndex.build(POOL), rng=rng, cache=cache,
                            policy=GeneratorPolicy(hard=Tier("hard", 3, 5)))
    g = gen.generate_detailed()
    assert (g.sequence, g.tier, g.support) == ("LIN", "hard", 7)
    assert rng.ints == []


def test_estimate_support_is_memoized(scripted):
    # 6 words > sample_size 3 -> three draws with replacement, all PLAIN
    rng = scripted(ints=[0, 0, 0])
    gen = _gen(rng, sample_size=3)
    assert gen.estimate_support("LIN", EASY) == 3
    # second call must not touch the (now empty) script
    assert gen.estimate_support("LIN", EASY) == 3
    assert gen.cache.get("LIN") == 3


def test_estimate_support_scans_small_pool(scripted):
    gen = _gen(scripted())
    assert gen.estimate_support("lin", EASY) == 5
    assert "LIN" in gen.cache


def test_fallback_sequence_skips_duplicates_and_forbidden_last(scripted):
    # S, S(dup), B, D(forbidden last), G(forbidden last), B(dup), C
    rng = scripted(ints=[18, 18, 1, 3, 6, 1, 2])
    assert _gen(rng).fallback_sequence() == "SBC"


@pytest.mark.parametrize("seed", range(20))
def test_empty_pool_falls_back(seed):
    gen = SequenceGenerator(DictionaryIndex.build([]), rng=random.Random(seed))
    g = gen.generate_detailed()
    assert g.fallback is True and g.attempts == 0 and g.support is None
    assert len(g.sequence) == 3 and len(set(g.sequence)) == 3
    assert g.sequence[2] not in "SGD"


def test_unsupported_pool_terminates_after_max_attempts():
    gen = SequenceGenerator(DictionaryIndex.build(["ABCDEFGHIJ"]), rng=random.Random(3),
                            policy=GeneratorPolicy(max_attempts=200))
    g = gen.generate_detailed()
    assert g.fallback is True and g.attempts == 200
    assert len(gen.cache) <= 120  # C(10, 3) candidate sequences at most


@pytest.mark.parametrize("seed", range(10))
def test_generated_sequences_have_legal_shape(seed):
    words = ["PLAIN", "CLINK", "LINEN", "BLIND", "SPLINT", "LIMIT", "ELEPHANT", "ABSTRACT",
             "CONTRACT", "PAINTBRUSH", "MOUNTAIN", "PLATFORM", "CHOCOLATE", "KANGAROO"]
    gen = SequenceGenerator(DictionaryIndex.build(words), rng=random.Random(seed),
                            policy=GeneratorPolicy(max_attempts=50))
    for _ in range(5):
        seq = gen.generate()
        assert len(seq) == 3 and seq.isalpha() and seq.isupper()
        assert seq[2] not in "SGD"


@pytest.mark.parametrize("n", range(3, 13))
def test_draw_positions_strictly_increasing(n):
    gen = SequenceGenerator(DictionaryIndex.build([]), rng=random.Random(n))
    for _ in range(200):
        i, j, k = gen.draw_positions(n)
        assert 0 <= i < j < k < n


def test_choose_tier(scripted):
    policy = GeneratorPolicy()
    assert policy.choose_tier(scripted(floats=[0.74])) is HARD
    assert policy.choose_tier(scripted(floats=[0.75])) is EASY


@pytest.mark.parametrize("kwargs", [
    {"hard_probability": 1.5},
    {"max_attempts": -1},
    {"max_attempts": 0},
    {"hard": Tier("hard", 3, 2)},
    {"sample_size": 0},
    {"alphabet": "SGDA"},
])
def test_policy_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        GeneratorPolicy(**kwargs)


def test_agenerate():
    gen = SequenceGenerator(DictionaryIndex.build(POOL), rng=random.Random(0))
    seq = asyncio.run(gen.agenerate())
    assert len(seq) == 3


def test_support_cache_is_write_once():
    cache = SupportCache()
    assert cache.get("LIN") is None
    assert cache.put("LIN", 4) == 4
    assert cache.put("LIN", 9) == 4
    assert cache.get("LIN") == 4 and len(cache) == 1


def test_hard_roll_with_no_long_words_falls_back_without_drawing(scripted):
    # Every POOL word is shorter than the hard tier's 8 letters.
    rng = scripted(ints=[1, 0, 2], floats=[HARD_ROLL])
    gen = _gen(rng)
    g = gen.generate_detailed()
    assert (g.sequence, g.tier, g.attempts, g.support, g.fallback) == ("BAC", "hard", 0, None, True)
    assert len(gen.cache) == 0
