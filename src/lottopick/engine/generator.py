"""Random combination generator with common-pattern avoidance."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone, tzinfo
from typing import cast

from lottopick.config import GeneratorConfig
from lottopick.storage import InMemoryStore, Store, StoreError

from .combination import Combination, to_iso_timestamp
from .filters import LuckyNumberFilter, PatternFilter
from .formatter import format_combination
from .sampler import UniformSampler

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CombinationGenerator:
    """Generate, filter and archive lottery combinations.

    The archive is loaded from ``store`` once at construction and written back
    after every mutation. Storage failures are logged and never raised to the
    caller; the in-memory archive stays authoritative for the session.

    Sizes default to the ``GeneratorConfig`` defaults (6 of 49, bonus 1~10).
    Passing them together with ``config`` raises ``TypeError``.
    """

    def __init__(
        self,
        number_count: int | None = None,
        max_number: int | None = None,
        bonus_number: int | None = None,
        *,
        store: Store | None = None,
        config: GeneratorConfig | None = None,
        sampler: UniformSampler | None = None,
        seed: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        sizes = {
            key: value
            for key, value in (
                ("number_count", number_count),
                ("max_number", max_number),
                ("bonus_number", bonus_number),
            )
            if value is not None
        }
        if config is not None and sizes:
            raise TypeError(f"Pass either config or {', '.join(sizes)}, not both.")
        self.config = config if config is not None else GeneratorConfig(**sizes)
        self.store: Store = store if store is not None else InMemoryStore()
        self.sampler = sampler or UniformSampler(seed=seed)
        self.clock = clock or _utc_now
        self.pattern_filter = PatternFilter.default(max_number=self.config.max_number)
        self.last_attempts = 0
        self.last_save_ok = True

        self._combinations: list[Combination] = self._load_combinations()
        self._last_id = max((combination.id for combination in self._combinations), default=0)

    @property
    def number_count(self) -> int:
        return self.config.number_count

    @property
    def max_number(self) -> int:
        return self.config.max_number

    @property
    def bonus_number(self) -> int:
        return self.config.bonus_number

    @property
    def use_smart_filters(self) -> bool:
        return self.config.smart_filters_enabled

    def set_smart_filters(self, enabled: bool) -> None:
        """Enable or disable pattern filtering for subsequent generations."""
        self.config.smart_filters_enabled = bool(enabled)

    # Pattern checks

    def is_common_pattern(self, numbers: Sequence[int]) -> bool:
        """Return True when the numbers match a commonly played pattern.

        Lucky-number saturation is reported through a warning only and never
        makes a combination common on its own.
        """
        return self.pattern_filter.is_common(numbers)

    def is_arithmetic_sequence(self, numbers: Sequence[int]) -> bool:
        return not self.pattern_filter.get_filter("arithmetic").evaluate(numbers).passed

    def is_birthday_pattern(self, numbers: Sequence[int]) -> bool:
        return not self.pattern_filter.get_filter("birthday").evaluate(numbers).passed

    def is_biased_range(self, numbers: Sequence[int]) -> bool:
        return not self.pattern_filter.get_filter("range").evaluate(numbers).passed

    def is_odd_even_biased(self, numbers: Sequence[int]) -> bool:
        return not self.pattern_filter.get_filter("odd_even").evaluate(numbers).passed

    def contains_lucky_numbers(self, numbers: Sequence[int]) -> bool:
        lucky = cast(LuckyNumberFilter, self.pattern_filter.get_filter("lucky"))
        return lucky.detect(numbers)

    # Generation

    def generate_random_numbers(self, count: int, max_number: int) -> tuple[int, ...]:
        """Draw ``count`` distinct numbers from ``1~max_number``, sorted ascending."""
        return self.sampler.draw(count, max_number)

    def generate_combination(self) -> Combination:
        """Draw one combination, re-drawing common patterns up to ``max_attempts`` times.

        When every attempt is rejected the last draw is kept, so filtering is
        best effort rather than a guarantee.
        """
        attempts = 0
        while True:
            numbers = self.generate_random_numbers(self.number_count, self.max_number)
            attempts += 1
            common = self.use_smart_filters and self.is_common_pattern(numbers)
            if not common or attempts >= self.config.max_attempts:
                break

        if common:
            logger.info("Accepting common pattern %s after %d attempts", list(numbers), attempts)
        self.last_attempts = attempts

        bonus = self.sampler.draw_one(self.bonus_number)
        now = self.clock()
        return Combination(
            numbers=numbers,
            bonus=bonus,
            timestamp=to_iso_timestamp(now),
            id=self._next_id(now),
        )

    def generate_and_save(self, count: int = 1) -> list[Combination]:
        """Generate ``count`` combinations, saving each one as it is created."""
        if count < 0:
            raise ValueError("count must be >= 0.")

        generated: list[Combination] = []
        for _ in range(count):
            combination = self.generate_combination()
            self.save_combination(combination)
            generated.append(combination)
        logger.debug("Generated %d combination(s)", len(generated))
        return generated

    def _next_id(self, now: datetime) -> int:
        # Millisecond timestamps collide when generating faster than the clock ticks.
        candidate = int(now.timestamp() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    # Archive

    def save_combination(self, combination: Combination) -> None:
        self._combinations.append(combination)
        self._save_combinations()

    def get_all_combinations(self) -> tuple[Combination, ...]:
        return tuple(self._combinations)

    def clear_combinations(self) -> None:
        self._combinations = []
        self._save_combinations()

    def delete_combination(self, combination_id: int) -> None:
        """Remove every combination with ``combination_id``; unknown ids are ignored."""
        self._combinations = [
            combination for combination in self._combinations if combination.id != combination_id
        ]
        self._save_combinations()

    def format_combination(self, combination: Combination, tz: tzinfo | None = None) -> str:
        return format_combination(combination, tz)

    def _save_combinations(self) -> None:
        payload = json.dumps([combination.as_dict() for combination in self._combinations])
        try:
            self.store.save(self.config.storage_key, payload)
        except StoreError as exc:
            self.last_save_ok = False
            logger.error("Failed to save combinations: %s", exc)
            return
        self.last_save_ok = True

    def _load_combinations(self) -> list[Combination]:
        try:
            stored = self.store.load(self.config.storage_key)
            if not stored:
                return []
            records = json.loads(stored)
            if not isinstance(records, list):
                raise ValueError(f"Expected a JSON array, got {type(records).__name__}.")
            return [Combination.from_dict(record) for record in records]
        except (StoreError, ValueError) as exc:
            logger.error("Failed to load combinations: %s", exc)
            return []
