from datetime import date, datetime

from activity_journal.categories import build_category_tree
from activity_journal.formatting import format_collisions, format_report, format_tree, sorted_by_hours
from activity_journal.metrics import calculate_stats
from activity_journal.schema import Entry


def sample_entries():
    return [
        Entry(datetime(2025, 1, 6, 8), datetime(2025, 1, 6, 9), "work email", False, True),
        Entry(datetime(2025, 1, 6, 9), datetime(2025, 1, 6, 9, 30), "work email urgent", False, True),
        Entry(datetime(2025, 1, 6, 22), datetime(2025, 1, 7, 6), "sleep"),
    ]


def test_sorted_by_hours_descending():
    assert sorted_by_hours({"work": 1.5, "sleep": 8.0, "read": 1.5}) == [("sleep", 8.0), ("read", 1.5), ("work", 1.5)]


def test_format_report_sections():
    entries = sample_entries()
    text = format_report(calculate_stats(entries), build_category_tree(entries).main_category_hours(), day=date(2025, 1, 6))
    assert text.startswith("Date: 2025-01-06")
    assert "Productive: 1.50 hours (100.0%)" in text
    assert text.index("sleep") < text.index("work")


def test_format_report_empty_lifetime():
    text = format_report(calculate_stats([]), {})
    assert "View: Lifetime Statistics" in text
    assert "No activities recorded." in text


def test_format_tree_indents_children():
    lines = format_tree(build_category_tree(sample_entries()).root).splitlines()
    assert lines[0] == "sleep (8.00 h)"
    assert lines[1] == "work (1.50 h)"
    assert lines[2] == "  email (1.50 h)"
    assert lines[3] == "    urgent (0.50 h)"
    assert len(format_tree(build_category_tree(sample_entries()).root, max_depth=1).splitlines()) == 2


def test_format_collisions():
    assert format_collisions([]) == "No collisions detected."
    text = format_collisions(sample_entries()[:1])
    assert "1. work email" in text
    assert "Duration: 1.00 hours" in text
