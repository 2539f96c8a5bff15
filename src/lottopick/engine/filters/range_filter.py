"""Lower/upper half concentration filter."""

from __future__ import annotations

from collections.abc import Sequence

from .base import BIAS_THRESHOLD, BaseFilter, FilterDecision


class BiasedRangeFilter(BaseFilter):
    """Reject combinations crowded into one half of ``1~max_number``."""

    name = "range"

    def __init__(self, max_number: int, threshold: int = BIAS_THRESHOLD) -> None:
        if max_number <= 0:
            raise ValueError("max_number must be > 0.")
        self.max_number = max_number
        self.threshold = threshold

    @property
    def midpoint(self) -> float:
        return self.max_number / 2

    def evaluate(self, combination: Sequence[int]) -> FilterDecision:
        numbers = self.normalize_combination(combination)
        lower = sum(1 for number in numbers if number <= self.midpoint)
        upper = len(numbers) - lower
        if lower >= self.threshold or upper >= self.threshold:
            return FilterDecision(
                False,
                reason=f"lower={lower} upper={upper} around {self.midpoint:g}",
            )
        return FilterDecision(True)
