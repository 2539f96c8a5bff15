"""Birthday pattern filter."""

from __future__ import annotations

from collections.abc import Sequence

from .base import BaseFilter, FilterDecision

DAY_MAX = 31
MONTH_MAX = 12


class BirthdayFilter(BaseFilter):
    """Reject combinations that lean on day (1~31) and month (1~12) numbers.

    The ranges overlap, so a month number also counts as a day number.
    """

    name = "birthday"

    def __init__(self, min_days: int = 4, min_day_month_days: int = 2) -> None:
        if min_days <= 0 or min_day_month_days <= 0:
            raise ValueError("Day thresholds must be > 0.")
        self.min_days = min_days
        self.min_day_month_days = min_day_month_days

    def evaluate(self, combination: Sequence[int]) -> FilterDecision:
        numbers = self.normalize_combination(combination)
        days = sum(1 for number in numbers if 1 <= number <= DAY_MAX)
        months = sum(1 for number in numbers if 1 <= number <= MONTH_MAX)

        if days >= self.min_days:
            return FilterDecision(False, reason=f"day_count={days} >= {self.min_days}")
        if days >= self.min_day_month_days and months >= 1:
            return FilterDecision(False, reason=f"day_count={days} with month_count={months}")
        return FilterDecision(True)
