"""Display formatting for combinations."""

from __future__ import annotations

from datetime import tzinfo

from .combination import Combination, parse_iso_timestamp

DISPLAY_DATETIME_FORMAT = "%d.%m.%Y, %H:%M:%S"


def format_timestamp(timestamp: str, tz: tzinfo | None = None) -> str:
    """Render an ISO instant as ``DD.MM.YYYY, HH:MM:SS`` in ``tz`` (local by default)."""
    return parse_iso_timestamp(timestamp).astimezone(tz).strftime(DISPLAY_DATETIME_FORMAT)


def format_combination(combination: Combination, tz: tzinfo | None = None) -> str:
    """Return e.g. ``3, 12, 19, 27, 41, 48 | Bonus: 5 (18.10.2026, 14:03:05)``."""
    numbers = ", ".join(str(number) for number in combination.numbers)
    when = format_timestamp(combination.timestamp, tz)
    return f"{numbers} | Bonus: {combination.bonus} ({when})"
