"""Lucky number detector."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .base import BaseFilter, FilterDecision

logger = logging.getLogger(__name__)

LUCKY_NUMBERS = frozenset({7, 11, 13, 21, 42})


def count_lucky_numbers(numbers: Sequence[int]) -> int:
    return sum(1 for number in numbers if number in LUCKY_NUMBERS)


class LuckyNumberFilter(BaseFilter):
    """Warn about popular "lucky" numbers without ever rejecting.

    ``detect`` reports saturation; ``evaluate`` always passes and only
    attaches the finding as the decision reason.
    """

    name = "lucky"
    advisory = True

    def __init__(self, min_lucky: int = 3) -> None:
        if min_lucky <= 0:
            raise ValueError("min_lucky must be > 0.")
        self.min_lucky = min_lucky

    def detect(self, combination: Sequence[int]) -> bool:
        return count_lucky_numbers(self.normalize_combination(combination)) >= self.min_lucky

    def evaluate(self, combination: Sequence[int]) -> FilterDecision:
        numbers = self.normalize_combination(combination)
        lucky = count_lucky_numbers(numbers)
        if lucky < self.min_lucky:
            return FilterDecision(True)
        logger.warning("Combination %s contains %d lucky numbers", list(numbers), lucky)
        return FilterDecision(True, reason=f"lucky_count={lucky} >= {self.min_lucky}")
