"""Journal CLI: add entries, check overlaps and print analysis reports."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from activity_journal.adapters import csv_adapter, json_adapter
from activity_journal.analysis import AnalysisService
from activity_journal.config import get_config
from activity_journal.formatting import format_collisions, format_entry, format_report, format_tree
from activity_journal.schema import Entry, validate_entry, validate_interval
from activity_journal.store import JournalStore

_TIME_FORMAT = "%Y-%m-%d %H:%M"


def _parse_day(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise SystemExit(f"Invalid date '{value}', expected YYYY-MM-DD") from exc


def _parse_time(value: str) -> datetime:
    try:
        return datetime.strptime(value, _TIME_FORMAT)
    except ValueError as exc:
        raise SystemExit(f"Invalid time '{value}', expected YYYY-MM-DD HH:MM") from exc


def _load_entries(path: Path) -> list[Entry]:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def cmd_report(args: argparse.Namespace, store: JournalStore) -> None:
    service = AnalysisService(store)
    day = _parse_day(args.date)
    if day is None:
        stats = service.lifetime_stats()
        activities = service.main_activity_hours()
    else:
        stats = service.stats_for_date(day)
        activities = service.main_activity_hours_for_date(day)

    if args.json:
        print(json.dumps({"stats": stats.as_dict(), "main_activities": activities}, indent=2))
        return
    print(format_report(stats, activities, day=day))


def cmd_tree(args: argparse.Namespace, store: JournalStore) -> None:
    root = AnalysisService(store).category_tree(_parse_day(args.date))
    print(format_tree(root, max_depth=args.depth) or "No activities recorded.")


def cmd_category(args: argparse.Namespace, store: JournalStore) -> None:
    entries = AnalysisService(store).entries_by_main_category(args.label, day=_parse_day(args.date))
    if not entries:
        print(f"No activities found for category: {args.label}")
        return
    for i, entry in enumerate(entries, start=1):
        print(f"{i}. {format_entry(entry)}")


def _entry_from_args(args: argparse.Namespace, label: str) -> Entry:
    start = _parse_time(args.start)
    end = _parse_time(args.end)
    try:
        validate_interval(start, end)
    except ValueError as exc:
        raise SystemExit(f"[{args.command}] {exc}") from exc
    return Entry(
        start=start,
        end=end,
        label=label,
        is_consuming=getattr(args, "consuming", False),
        is_productive=getattr(args, "productive", False),
        note=getattr(args, "note", "") or "",
    )


def cmd_check(args: argparse.Namespace, store: JournalStore) -> None:
    probe = _entry_from_args(args, label="")
    print(format_collisions(store.check_collisions(probe)))


def cmd_add(args: argparse.Namespace, store: JournalStore) -> None:
    entry = _entry_from_args(args, label=args.label)
    collisions = store.check_collisions(entry)
    if collisions and not args.force:
        print(format_collisions(collisions))
        raise SystemExit(f"[add] Entry overlaps {len(collisions)} existing entries; use --force to add anyway")

    try:
        store.save_entry(entry)
    except ValueError as exc:
        raise SystemExit(f"[add] {exc}") from exc
    print(f"[add] Saved: {format_entry(entry)}")


def cmd_import(args: argparse.Namespace, store: JournalStore) -> None:
    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"[import] File not found: {path}")

    try:
        entries = _load_entries(path)
        for row_number, entry in enumerate(entries, start=1):
            try:
                validate_entry(entry)
            except ValueError as exc:
                raise ValueError(f"Entry {row_number}: {exc}") from exc
        for entry in entries:
            store.save_entry(entry)
    except ValueError as exc:
        raise SystemExit(f"[import] {exc}") from exc
    print(f"[import] Imported {len(entries)} entries into {store.data_dir}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Activity journal: track activities and analyse time")
    parser.add_argument("--data-dir", default=None, help="Directory with per-day JSON files")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_p = subparsers.add_parser("report", help="Consuming/productive stats and main categories")
    report_p.add_argument("--date", help="Day to report (YYYY-MM-DD); lifetime when omitted")
    report_p.add_argument("--json", action="store_true", help="Print JSON instead of text")
    report_p.set_defaults(func=cmd_report)

    tree_p = subparsers.add_parser("tree", help="Print the category tree")
    tree_p.add_argument("--date", help="Day to analyse (YYYY-MM-DD); lifetime when omitted")
    tree_p.add_argument("--depth", type=int, default=None, help="Maximum depth to print")
    tree_p.set_defaults(func=cmd_tree)

    cat_p = subparsers.add_parser("category", help="List entries of one main category")
    cat_p.add_argument("label", help="Main category, e.g. 'work'")
    cat_p.add_argument("--date", help="Restrict to one day (YYYY-MM-DD)")
    cat_p.set_defaults(func=cmd_category)

    for name, help_text in (("check", "Check an interval for overlaps"), ("add", "Add an activity")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--start", required=True, help="Start time (YYYY-MM-DD HH:MM)")
        sub.add_argument("--end", required=True, help="End time (YYYY-MM-DD HH:MM)")
        if name == "add":
            sub.add_argument("label", help="Activity label, e.g. 'work email'")
            sub.add_argument("--consuming", action="store_true")
            sub.add_argument("--productive", action="store_true")
            sub.add_argument("--note", default="")
            sub.add_argument("--force", action="store_true", help="Save even when overlapping")
            sub.set_defaults(func=cmd_add)
        else:
            sub.set_defaults(func=cmd_check)

    import_p = subparsers.add_parser("import", help="Import entries from a CSV/JSON file")
    import_p.add_argument("path", help="Path to CSV/JSON entries file")
    import_p.set_defaults(func=cmd_import)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    config = get_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    store = JournalStore(args.data_dir if args.data_dir is not None else config.data_dir)
    args.func(args, store)


if __name__ == "__main__":
    main()
