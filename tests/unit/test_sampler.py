from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from lottopick.engine.sampler import UniformSampler


def test_draw_returns_sorted_distinct_numbers():
    sampler = UniformSampler(seed=42)

    for _ in range(200):
        combo = sampler.draw(6, 49)
        assert len(combo) == 6
        assert len(set(combo)) == 6
        assert tuple(sorted(combo)) == combo
        assert all(1 <= number <= 49 for number in combo)


def test_draw_full_range_and_empty_draw():
    sampler = UniformSampler(seed=1)

    assert sampler.draw(10, 10) == tuple(range(1, 11))
    assert sampler.draw(0, 10) == ()


def test_same_seed_reproduces_draws():
    first = UniformSampler(seed=99)
    second = UniformSampler(rng=np.random.default_rng(99))

    assert [first.draw(6, 49) for _ in range(5)] == [second.draw(6, 49) for _ in range(5)]


def test_draw_one_covers_inclusive_range():
    sampler = UniformSampler(seed=3)

    counts = Counter(sampler.draw_one(4) for _ in range(2000))

    assert set(counts) == {1, 2, 3, 4}
    assert min(counts.values()) > 350


def test_invalid_draws_raise():
    sampler = UniformSampler(seed=0)

    with pytest.raises(ValueError):
        sampler.draw(7, 6)
    with pytest.raises(ValueError):
        sampler.draw(-1, 6)
    with pytest.raises(ValueError):
        sampler.draw_one(0)
