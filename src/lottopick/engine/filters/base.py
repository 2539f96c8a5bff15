"""Base types for pattern filters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

# Count at which a half of the range or a parity is considered over-represented.
# Fixed rather than scaled with the configured number count.
BIAS_THRESHOLD = 5


@dataclass(frozen=True)
class FilterDecision:
    """Filter evaluation result."""

    passed: bool
    reason: str | None = None


class BaseFilter(ABC):
    """Base class for all combination filters."""

    name: str
    advisory: bool = False

    @abstractmethod
    def evaluate(self, combination: Sequence[int]) -> FilterDecision:
        """Evaluate whether the given combination passes this filter."""

    @staticmethod
    def normalize_combination(combination: Sequence[int]) -> tuple[int, ...]:
        """Return the combination as a sorted tuple of ints."""
        numbers = tuple(sorted(int(value) for value in combination))
        if len(set(numbers)) != len(numbers):
            raise ValueError("Combination numbers must be unique.")
        return numbers
