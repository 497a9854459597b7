from datetime import datetime

from activity_journal.metrics import ConsumingProductiveStats, calculate_stats
from activity_journal.schema import Entry


def _entry(start, end, consuming, productive, label="x"):
    return Entry(datetime.fromisoformat(start), datetime.fromisoformat(end), label, consuming, productive)


def test_empty_entries_give_zero_stats():
    stats = calculate_stats([])
    assert stats == ConsumingProductiveStats(0.0, 0.0, 0.0, 0.0, 0.0)


def test_end_to_end_scenario():
    entries = [
        _entry("2025-01-06T08:00", "2025-01-06T09:00", False, True, "work email"),
        _entry("2025-01-06T09:00", "2025-01-06T09:30", False, True, "work email urgent"),
        _entry("2025-01-06T22:00", "2025-01-07T06:00", False, False, "sleep"),
    ]
    stats = calculate_stats(entries)
    assert stats.consuming_hours == 0.0
    assert stats.productive_hours == 1.5
    assert stats.total_hours == 1.5
    assert stats.productive_percentage == 100.0
    assert stats.consuming_percentage == 0.0


def test_entries_flagged_both_are_counted_twice():
    entries = [
        _entry("2025-01-06T12:00", "2025-01-06T13:00", True, True),
        _entry("2025-01-06T13:00", "2025-01-06T16:00", True, False),
    ]
    stats = calculate_stats(entries)
    assert stats.consuming_hours == 4.0
    assert stats.productive_hours == 1.0
    assert stats.total_hours == 5.0
    assert stats.consuming_percentage == 80.0
    assert stats.productive_percentage == 20.0


def test_neither_flag_only_gives_zero_percentages():
    stats = calculate_stats([_entry("2025-01-06T12:00", "2025-01-06T13:00", False, False)])
    assert stats.total_hours == 0.0
    assert stats.consuming_percentage == 0.0
    assert stats.productive_percentage == 0.0


def test_missing_timestamps_contribute_zero():
    entries = [
        Entry(None, datetime(2025, 1, 6, 9), "x", True, False),
        _entry("2025-01-06T09:00", "2025-01-06T09:30", True, False),
    ]
    assert calculate_stats(entries).consuming_hours == 0.5


def test_as_dict_keys():
    assert set(calculate_stats([]).as_dict()) == {
        "consuming_hours",
        "productive_hours",
        "total_hours",
        "consuming_percentage",
        "productive_percentage",
    }
