import json
from datetime import datetime

import pytest

from activity_journal.adapters.csv_adapter import dump as dump_csv
from activity_journal.adapters.csv_adapter import parse as parse_csv
from activity_journal.adapters.json_adapter import dump as dump_json
from activity_journal.adapters.json_adapter import parse as parse_json
from activity_journal.schema import Entry


def test_csv_parse_success(tmp_path):
    path = tmp_path / "entries.csv"
    path.write_text(
        "start,end,label,is_consuming,is_productive,note\n"
        "2025-01-06T08:00,2025-01-06T09:00,work email,false,true,inbox\n"
        "2025-01-06T19:00,2025-01-06T21:00,watching tv,yes,,\n",
        encoding="utf-8",
    )
    entries = parse_csv(str(path))
    assert len(entries) == 2
    assert entries[0].is_productive and not entries[0].is_consuming
    assert entries[0].note == "inbox"
    assert entries[1].is_consuming and not entries[1].is_productive
    assert entries[1].duration_hours == 2.0


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "entries.csv"
    path.write_text("start,end,label\nbad,2025-01-06T09:00,work\n", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_csv(str(path))


def test_csv_parse_invalid_flag(tmp_path):
    path = tmp_path / "entries.csv"
    path.write_text(
        "start,end,label,is_consuming\n2025-01-06T08:00,2025-01-06T09:00,work,maybe\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_csv_dump_then_parse(tmp_path):
    path = tmp_path / "out.csv"
    entry = Entry(datetime(2025, 1, 6, 8), datetime(2025, 1, 6, 9), "work email", False, True, "note")
    dump_csv([entry], str(path))
    assert parse_csv(str(path)) == [entry]


def test_json_parse_success(tmp_path):
    path = tmp_path / "entries.json"
    payload = [
        {"start": "2025-01-06T08:00", "end": "2025-01-06T09:00", "label": "work email", "is_productive": True},
        {"start": "2025-01-06T09:00", "end": "2025-01-06T09:30", "label": "coffee", "note": "break"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    entries = parse_json(str(path))
    assert len(entries) == 2
    assert entries[0].is_productive
    assert entries[1].note == "break"


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text(json.dumps([{"start": "bad", "end": "2025-01-06T09:00", "label": "x"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_parse_rejects_non_list(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text(json.dumps({"start": "2025-01-06T08:00"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_dump_writes_minute_timestamps(tmp_path):
    path = tmp_path / "out.json"
    dump_json([Entry(datetime(2025, 1, 6, 8), datetime(2025, 1, 6, 9), "work")], str(path))
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload[0]["start"] == "2025-01-06T08:00"
    assert payload[0]["is_consuming"] is False


def test_json_parse_keeps_incomplete_items(tmp_path):
    path = tmp_path / "entries.json"
    payload = [{"start": "2025-01-06T08:00", "end": None, "label": None}]
    path.write_text(json.dumps(payload), encoding="utf-8")
    entry = parse_json(str(path))[0]
    assert entry.end is None
    assert entry.label is None
    assert entry.duration_hours == 0.0


def test_json_parse_rejects_non_boolean_flags(tmp_path):
    path = tmp_path / "entries.json"
    payload = [{"start": "2025-01-06T08:00", "end": "2025-01-06T09:00", "label": "tv", "is_consuming": "false"}]
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1"):
        parse_json(str(path))
