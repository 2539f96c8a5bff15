"""Uniform sampler for distinct lottery numbers."""

from __future__ import annotations

import numpy as np


class UniformSampler:
    """Draw distinct numbers from ``1~max_number`` by rejection sampling."""

    def __init__(self, *, seed: int | None = None, rng: np.random.Generator | None = None) -> None:
        self.rng = rng or np.random.default_rng(seed)

    def draw(self, count: int, max_number: int) -> tuple[int, ...]:
        """Return ``count`` distinct numbers sorted ascending."""
        if count < 0:
            raise ValueError("count must be >= 0.")
        if count > max_number:
            raise ValueError(f"Cannot draw {count} distinct numbers from 1~{max_number}.")

        drawn: set[int] = set()
        while len(drawn) < count:
            drawn.add(self.draw_one(max_number))
        return tuple(sorted(drawn))

    def draw_one(self, max_number: int) -> int:
        """Return a single number from ``1~max_number`` inclusive."""
        if max_number <= 0:
            raise ValueError("max_number must be > 0.")
        return int(self.rng.integers(1, max_number + 1))
