"""Temporal overlap detection between journal entries."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from activity_journal.schema import Entry


def check_collisions(candidate: Entry, reference: Iterable[Entry]) -> list[Entry]:
    """Return reference entries whose [start, end) interval intersects the candidate's.

    Back-to-back entries (one ends exactly when the other starts) do not
    collide. Entries with a missing timestamp are skipped, and a candidate
    with a missing timestamp collides with nothing.
    """

    if candidate.start is None or candidate.end is None:
        return []

    collisions = []
    for existing in reference:
        if existing.start is None or existing.end is None:
            continue
        if candidate.start < existing.end and candidate.end > existing.start:
            collisions.append(existing)
    return collisions


def last_activity_end_time(entries: Iterable[Entry]) -> Optional[datetime]:
    """Latest end time among the entries, or None."""

    return max((entry.end for entry in entries if entry.end is not None), default=None)


def suggest_next_interval(
    entries: Iterable[Entry],
    day: date,
    now: datetime,
    default_duration_hours: float = 1.0,
) -> tuple[datetime, datetime]:
    """Propose a start/end pair for the next activity on ``day``.

    Starts where the day's last activity ended (midnight for an empty day).
    Ends at ``now`` when that is later on the same day, else after the
    default duration.
    """

    start = last_activity_end_time(entries) or datetime.combine(day, time.min)
    end = now
    if end <= start or start.date() != now.date():
        end = start + timedelta(hours=default_duration_hours)
    return start, end
