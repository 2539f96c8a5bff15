"""Common-pattern detection across the heuristic filters."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass

from .arithmetic_filter import ArithmeticSequenceFilter
from .base import BaseFilter
from .birthday_filter import BirthdayFilter
from .lucky_filter import LuckyNumberFilter
from .odd_even_filter import OddEvenFilter
from .range_filter import BiasedRangeFilter


@dataclass(frozen=True)
class PatternDecision:
    """Outcome of checking one combination for common patterns."""

    common: bool
    filters_passed: tuple[str, ...]
    failed_filter: str | None = None
    reason: str | None = None
    warnings: tuple[str, ...] = ()


class PatternFilter:
    """Apply filters in order and stop at the first rejection.

    Filters flagged ``advisory`` are evaluated for their warnings but can
    never mark a combination as common.
    """

    def __init__(self, filters: Sequence[BaseFilter] | None = None) -> None:
        self.filters = list(filters or [])
        self._rejection_counts: dict[str, int] = defaultdict(int)
        self._warning_counts: dict[str, int] = defaultdict(int)

    @classmethod
    def default(cls, max_number: int) -> PatternFilter:
        """Build the standard chain for a ``1~max_number`` lottery."""
        return cls(
            [
                ArithmeticSequenceFilter(),
                BirthdayFilter(),
                BiasedRangeFilter(max_number=max_number),
                OddEvenFilter(),
                LuckyNumberFilter(),
            ]
        )

    def get_filter(self, name: str) -> BaseFilter:
        for filter_obj in self.filters:
            if filter_obj.name == name:
                return filter_obj
        raise KeyError(f"No filter named '{name}'.")

    def evaluate(self, combination: Sequence[int]) -> PatternDecision:
        passed: list[str] = []
        warnings: list[str] = []
        for filter_obj in self.filters:
            decision = filter_obj.evaluate(combination)
            if filter_obj.advisory:
                if decision.reason is not None:
                    self._warning_counts[filter_obj.name] += 1
                    warnings.append(decision.reason)
                passed.append(filter_obj.name)
                continue
            if not decision.passed:
                self._rejection_counts[filter_obj.name] += 1
                return PatternDecision(
                    common=True,
                    filters_passed=tuple(passed),
                    failed_filter=filter_obj.name,
                    reason=decision.reason,
                    warnings=tuple(warnings),
                )
            passed.append(filter_obj.name)

        return PatternDecision(common=False, filters_passed=tuple(passed), warnings=tuple(warnings))

    def is_common(self, combination: Sequence[int]) -> bool:
        return self.evaluate(combination).common

    @property
    def rejection_counts(self) -> dict[str, int]:
        """Return per-filter rejection counts."""
        return dict(self._rejection_counts)

    @property
    def warning_counts(self) -> dict[str, int]:
        """Return per-filter warning counts from advisory filters."""
        return dict(self._warning_counts)
