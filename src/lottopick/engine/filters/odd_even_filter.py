"""Odd-even balance filter."""

from __future__ import annotations

from collections.abc import Sequence

from .base import BIAS_THRESHOLD, BaseFilter, FilterDecision


class OddEvenFilter(BaseFilter):
    """Reject combinations where one parity reaches the threshold."""

    name = "odd_even"

    def __init__(self, threshold: int = BIAS_THRESHOLD) -> None:
        if threshold <= 0:
            raise ValueError("threshold must be > 0.")
        self.threshold = threshold

    def evaluate(self, combination: Sequence[int]) -> FilterDecision:
        numbers = self.normalize_combination(combination)
        odd_count = sum(1 for number in numbers if number % 2 == 1)
        even_count = len(numbers) - odd_count
        if odd_count >= self.threshold or even_count >= self.threshold:
            return FilterDecision(False, reason=f"odd={odd_count} even={even_count}")
        return FilterDecision(True)
