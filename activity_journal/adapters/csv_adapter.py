"""CSV adapter for journal entries."""

from __future__ import annotations

import csv
from datetime import datetime
from typing import Iterable

from activity_journal.schema import Entry

_REQUIRED_FIELDS = {"start", "end", "label"}
_FIELDNAMES = ["start", "end", "label", "is_consuming", "is_productive", "note"]
_TRUE_VALUES = {"1", "true", "yes", "y"}
_FALSE_VALUES = {"", "0", "false", "no", "n"}


def _parse_flag(raw, field: str, row_number: int) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Row {row_number}: invalid {field} '{raw}'")


def _parse_row(row: dict, row_number: int) -> Entry:
    missing = sorted(field for field in _REQUIRED_FIELDS if not (row.get(field) or "").strip())
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        start = datetime.fromisoformat(row["start"].strip())
        end = datetime.fromisoformat(row["end"].strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: malformed timestamp") from exc

    return Entry(
        start=start,
        end=end,
        label=row["label"].strip(),
        is_consuming=_parse_flag(row.get("is_consuming"), "is_consuming", row_number),
        is_productive=_parse_flag(row.get("is_productive"), "is_productive", row_number),
        note=(row.get("note") or "").strip(),
    )


def parse(file_path: str) -> list[Entry]:
    """Parse CSV file into a list of entries."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        entries: list[Entry] = []
        for row_number, row in enumerate(reader, start=2):
            entries.append(_parse_row(row, row_number))
        return entries


def dump(entries: Iterable[Entry], file_path: str) -> None:
    """Write entries to CSV with one row per entry."""

    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=_FIELDNAMES)
        writer.writeheader()
        for entry in entries:
            writer.writerow(
                {
                    "start": entry.start.isoformat(timespec="minutes") if entry.start else "",
                    "end": entry.end.isoformat(timespec="minutes") if entry.end else "",
                    "label": entry.label or "",
                    "is_consuming": "true" if entry.is_consuming else "false",
                    "is_productive": "true" if entry.is_productive else "false",
                    "note": entry.note,
                }
            )
