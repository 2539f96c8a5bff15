"""Tabular export of the combination archive."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from lottopick.engine.combination import Combination

BASE_COLUMNS = ["id", "timestamp"]


def number_columns(count: int) -> list[str]:
    return [f"n{index}" for index in range(1, count + 1)]


def combinations_to_frame(combinations: Sequence[Combination]) -> pd.DataFrame:
    """Return one row per combination with columns ``id, timestamp, n1..nN, bonus``.

    ``N`` is the longest combination in the archive; shorter rows are padded
    with missing values.
    """
    width = max((len(combination.numbers) for combination in combinations), default=0)
    columns = BASE_COLUMNS + number_columns(width) + ["bonus"]
    rows = []
    for combination in combinations:
        row: dict[str, object] = {"id": combination.id, "timestamp": combination.timestamp}
        row.update(zip(number_columns(width), combination.numbers))
        row["bonus"] = combination.bonus
        rows.append(row)

    frame = pd.DataFrame(rows, columns=columns)
    if frame.empty:
        return frame
    if all(len(combination.numbers) == width for combination in combinations):
        frame[number_columns(width)] = frame[number_columns(width)].astype(int)
    return frame


def export_csv(
    combinations: Sequence[Combination],
    csv_path: str | Path,
    *,
    encoding: str = "utf-8",
) -> Path:
    """Write the archive to ``csv_path`` and return the resolved path."""
    path = Path(csv_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    combinations_to_frame(combinations).to_csv(path, index=False, encoding=encoding)
    return path
