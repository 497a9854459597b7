"""JSON adapter for journal entries."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Iterable, Optional

from activity_journal.schema import Entry


def _parse_timestamp(value, field: str, index: int) -> Optional[datetime]:
    if value in (None, ""):
        return None
    try:
        return datetime.fromisoformat(str(value))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: malformed {field} timestamp") from exc


def _parse_flag(value, field: str, index: int) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"Item {index}: {field} must be true or false, got {value!r}")
    return value


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat(timespec="minutes") if value is not None else None


def _parse_item(item: dict, index: int) -> Entry:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    # Incomplete records are kept with None fields; analysis treats them as zero-length.
    label_raw = item.get("label")
    note_raw = item.get("note")
    return Entry(
        start=_parse_timestamp(item.get("start"), "start", index),
        end=_parse_timestamp(item.get("end"), "end", index),
        label=str(label_raw).strip() if label_raw is not None else None,
        is_consuming=_parse_flag(item.get("is_consuming"), "is_consuming", index),
        is_productive=_parse_flag(item.get("is_productive"), "is_productive", index),
        note=str(note_raw).strip() if note_raw else "",
    )


def to_item(entry: Entry) -> dict:
    return {
        "start": _format_timestamp(entry.start),
        "end": _format_timestamp(entry.end),
        "label": entry.label,
        "is_consuming": entry.is_consuming,
        "is_productive": entry.is_productive,
        "note": entry.note,
    }


def parse_payload(payload) -> list[Entry]:
    """Convert an already-decoded JSON list into entries."""

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")
    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]


def parse(file_path: str) -> list[Entry]:
    """Parse JSON file into entries."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)
    return parse_payload(payload)


def dump(entries: Iterable[Entry], file_path: str) -> None:
    """Write entries as a pretty-printed JSON list."""

    with open(file_path, "w", encoding="utf-8") as handle:
        json.dump([to_item(entry) for entry in entries], handle, indent=2)
        handle.write("\n")
