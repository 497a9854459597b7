"""Consuming vs productive time breakdown."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

import numpy as np

from activity_journal.schema import Entry


@dataclass(frozen=True)
class ConsumingProductiveStats:
    """Hour totals and percentage shares for consuming and productive time."""

    consuming_hours: float = 0.0
    productive_hours: float = 0.0
    total_hours: float = 0.0
    consuming_percentage: float = 0.0
    productive_percentage: float = 0.0

    @classmethod
    def from_hours(cls, consuming_hours: float, productive_hours: float) -> ConsumingProductiveStats:
        # Total is the sum of both filtered totals, not of every entry.
        total = consuming_hours + productive_hours
        if total > 0:
            consuming_pct = consuming_hours / total * 100.0
            productive_pct = productive_hours / total * 100.0
        else:
            consuming_pct = 0.0
            productive_pct = 0.0
        return cls(
            consuming_hours=consuming_hours,
            productive_hours=productive_hours,
            total_hours=total,
            consuming_percentage=consuming_pct,
            productive_percentage=productive_pct,
        )

    def as_dict(self) -> dict:
        return asdict(self)


def calculate_stats(entries: Iterable[Entry]) -> ConsumingProductiveStats:
    """Sum durations of consuming and productive entries."""

    entries = list(entries)
    if not entries:
        return ConsumingProductiveStats()

    durations = np.asarray([entry.duration_hours for entry in entries], dtype=float)
    consuming = np.asarray([bool(entry.is_consuming) for entry in entries], dtype=bool)
    productive = np.asarray([bool(entry.is_productive) for entry in entries], dtype=bool)

    return ConsumingProductiveStats.from_hours(
        consuming_hours=float(durations[consuming].sum()),
        productive_hours=float(durations[productive].sum()),
    )
