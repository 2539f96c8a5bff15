"""Arithmetic sequence filter."""

from __future__ import annotations

from collections.abc import Sequence

from .base import BaseFilter, FilterDecision


def find_arithmetic_triple(numbers: Sequence[int]) -> tuple[int, int, int] | None:
    """Return the first consecutive triple with a constant positive step."""
    for first, second, third in zip(numbers, numbers[1:], numbers[2:]):
        step = second - first
        if step > 0 and third - second == step:
            return first, second, third
    return None


class ArithmeticSequenceFilter(BaseFilter):
    """Reject runs such as 1,2,3 or 10,20,30 anywhere in the sorted numbers."""

    name = "arithmetic"

    def evaluate(self, combination: Sequence[int]) -> FilterDecision:
        numbers = self.normalize_combination(combination)
        triple = find_arithmetic_triple(numbers)
        if triple is None:
            return FilterDecision(True)
        return FilterDecision(False, reason=f"arithmetic run {triple[0]},{triple[1]},{triple[2]}")
