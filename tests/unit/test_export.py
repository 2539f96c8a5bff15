from __future__ import annotations

import pandas as pd

from lottopick.data import combinations_to_frame, export_csv
from lottopick.engine.combination import Combination


def _archive() -> list[Combination]:
    return [
        Combination(numbers=(3, 12, 19, 27, 41, 48), bonus=5, timestamp="2026-10-18T12:00:00.000Z", id=1),
        Combination(numbers=(1, 9, 17, 23, 34, 44), bonus=10, timestamp="2026-10-18T12:00:01.000Z", id=2),
    ]


def test_combinations_to_frame_columns_and_order():
    frame = combinations_to_frame(_archive())

    assert list(frame.columns) == ["id", "timestamp", "n1", "n2", "n3", "n4", "n5", "n6", "bonus"]
    assert frame["id"].tolist() == [1, 2]
    assert frame.iloc[0][["n1", "n6"]].tolist() == [3, 48]
    assert frame["bonus"].tolist() == [5, 10]


def test_empty_archive_gives_empty_frame():
    frame = combinations_to_frame([])

    assert frame.empty
    assert list(frame.columns) == ["id", "timestamp", "bonus"]


def test_export_csv_writes_readable_file(tmp_path):
    path = export_csv(_archive(), tmp_path / "out" / "archive.csv")

    loaded = pd.read_csv(path)

    assert len(loaded) == 2
    assert loaded["n3"].tolist() == [19, 17]
