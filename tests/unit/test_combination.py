from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lottopick.engine.combination import Combination, parse_iso_timestamp, to_iso_timestamp
from lottopick.engine.formatter import format_combination, format_timestamp


def _combination() -> Combination:
    return Combination(numbers=(3, 12, 19, 27, 41, 48), bonus=5, timestamp="2026-10-18T14:03:05.123Z", id=1792245785123)


def test_as_dict_and_from_dict():
    combination = _combination()

    record = combination.as_dict()

    assert record == {
        "numbers": [3, 12, 19, 27, 41, 48],
        "bonus": 5,
        "timestamp": "2026-10-18T14:03:05.123Z",
        "id": 1792245785123,
    }
    assert Combination.from_dict(record) == combination


@pytest.mark.parametrize(
    "record",
    [
        {"numbers": [1, 2], "bonus": 1, "timestamp": "2026-10-18T00:00:00.000Z"},
        {"numbers": None, "bonus": 1, "timestamp": "x", "id": 1},
        {"numbers": [1, 2], "bonus": "five", "timestamp": "x", "id": 1},
    ],
)
def test_from_dict_rejects_malformed_records(record):
    with pytest.raises(ValueError, match="Malformed combination record"):
        Combination.from_dict(record)


def test_iso_timestamp_uses_utc_millisecond_precision():
    moment = datetime(2026, 10, 18, 16, 3, 5, 123456, tzinfo=timezone(timedelta(hours=2)))

    assert to_iso_timestamp(moment) == "2026-10-18T14:03:05.123Z"
    assert parse_iso_timestamp("2026-10-18T14:03:05.123Z") == datetime(
        2026, 10, 18, 14, 3, 5, 123000, tzinfo=timezone.utc
    )


def test_naive_timestamp_is_treated_as_utc():
    assert parse_iso_timestamp("2026-10-18T14:03:05").tzinfo == timezone.utc


def test_created_at():
    assert _combination().created_at.year == 2026


def test_format_combination_in_given_timezone():
    berlin_summer = timezone(timedelta(hours=2))

    text = format_combination(_combination(), tz=berlin_summer)

    assert text == "3, 12, 19, 27, 41, 48 | Bonus: 5 (18.10.2026, 16:03:05)"


def test_format_timestamp_is_deterministic():
    assert format_timestamp("2026-01-02T03:04:05.000Z", tz=timezone.utc) == "02.01.2026, 03:04:05"
