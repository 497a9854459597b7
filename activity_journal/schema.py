"""Core data schema for journal entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


class InvalidEntryError(ValueError):
    """Raised when an entry is rejected before it is stored."""


@dataclass(frozen=True)
class Entry:
    """One timed activity record. Never mutated by the analysis code."""

    start: Optional[datetime]
    end: Optional[datetime]
    label: Optional[str]
    is_consuming: bool = False
    is_productive: bool = False
    note: str = ""

    @property
    def duration_hours(self) -> float:
        if self.start is None or self.end is None:
            return 0.0
        minutes = int((self.end - self.start).total_seconds() / 60)
        return minutes / 60.0

    @property
    def day(self) -> Optional[date]:
        return self.start.date() if self.start is not None else None


def validate_interval(start: Optional[datetime], end: Optional[datetime]) -> None:
    """Reject missing, equal or inverted timestamps."""

    if start is None or end is None:
        raise InvalidEntryError("Start and end time are required")
    if end <= start:
        raise InvalidEntryError("End time must be after start time")


def validate_entry(entry: Entry) -> None:
    """Check an entry before it is accepted into storage."""

    validate_interval(entry.start, entry.end)
    if not entry.label or not entry.label.strip():
        raise InvalidEntryError("Activity label cannot be empty")
