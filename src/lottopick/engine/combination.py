"""Generated combination record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def to_iso_timestamp(moment: datetime) -> str:
    """Render an aware datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_iso_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 instant, accepting a trailing ``Z``."""
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Combination:
    """One generated set of numbers with its bonus number."""

    numbers: tuple[int, ...]
    bonus: int
    timestamp: str
    id: int

    def as_dict(self) -> dict[str, Any]:
        """Convert to the stored JSON record shape."""
        return {
            "numbers": list(self.numbers),
            "bonus": self.bonus,
            "timestamp": self.timestamp,
            "id": self.id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Combination:
        """Build a combination from a stored record."""
        try:
            numbers = tuple(int(value) for value in data["numbers"])
            bonus = int(data["bonus"])
            timestamp = str(data["timestamp"])
            combination_id = int(data["id"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Malformed combination record: {data!r}") from exc
        return cls(numbers=numbers, bonus=bonus, timestamp=timestamp, id=combination_id)

    @property
    def created_at(self) -> datetime:
        return parse_iso_timestamp(self.timestamp)
