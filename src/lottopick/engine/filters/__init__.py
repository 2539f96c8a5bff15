"""Common-pattern filters."""

from .arithmetic_filter import ArithmeticSequenceFilter
from .base import BaseFilter, FilterDecision
from .birthday_filter import BirthdayFilter
from .lucky_filter import LUCKY_NUMBERS, LuckyNumberFilter
from .odd_even_filter import OddEvenFilter
from .pipeline import PatternDecision, PatternFilter
from .range_filter import BiasedRangeFilter

__all__ = [
    "ArithmeticSequenceFilter",
    "BaseFilter",
    "BiasedRangeFilter",
    "BirthdayFilter",
    "FilterDecision",
    "LUCKY_NUMBERS",
    "LuckyNumberFilter",
    "OddEvenFilter",
    "PatternDecision",
    "PatternFilter",
]
