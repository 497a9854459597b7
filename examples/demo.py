"""Demo script for activity-journal."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from activity_journal.adapters.csv_adapter import parse
from activity_journal.categories import build_category_tree
from activity_journal.formatting import format_collisions, format_report, format_tree
from activity_journal.metrics import calculate_stats
from activity_journal.overlap import check_collisions
from activity_journal.schema import Entry


def main() -> None:
    entries = parse("examples/sample_dataset.csv")
    tree = build_category_tree(entries)
    print(format_report(calculate_stats(entries), tree.main_category_hours()))
    print()
    print(format_tree(tree.root))
    print()

    probe = Entry(start=entries[1].start, end=entries[2].end, label="")
    print(format_collisions(check_collisions(probe, entries)))


if __name__ == "__main__":
    main()
