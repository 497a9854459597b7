"""Per-day JSON storage of journal entries.

Each calendar day lives in ``<data_dir>/YYYY-MM-DD.json`` as a JSON list.
Unreadable or malformed day files are logged and treated as empty.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from activity_journal import overlap
from activity_journal.adapters import json_adapter
from activity_journal.config import get_config
from activity_journal.schema import Entry, validate_entry

logger = logging.getLogger(__name__)

_DATE_FORMAT = "%Y-%m-%d"


class JournalStore:
    """Loads and saves whole per-day entry sets."""

    def __init__(self, data_dir: Optional[str] = None) -> None:
        self.data_dir = Path(data_dir if data_dir is not None else get_config().data_dir)

    def path_for_date(self, day: date) -> Path:
        return self.data_dir / f"{day.strftime(_DATE_FORMAT)}.json"

    def read_entries_for_date(self, day: date) -> list[Entry]:
        """Load a day strictly; an unreadable or malformed file raises."""

        path = self.path_for_date(day)
        if not path.exists():
            return []
        payload = json.loads(path.read_text(encoding="utf-8"))
        return json_adapter.parse_payload(payload)

    def load_entries_for_date(self, day: date) -> list[Entry]:
        path = self.path_for_date(day)
        try:
            return self.read_entries_for_date(day)
        except (OSError, ValueError) as exc:
            logger.warning("Error loading entries from %s: %s", path, exc)
            return []

    def load_today_entries(self) -> list[Entry]:
        return self.load_entries_for_date(date.today())

    def save_entry(self, entry: Entry) -> None:
        """Validate the entry and append it to its start day's file.

        A day file that cannot be read is left untouched and the error propagates.
        """

        validate_entry(entry)
        day = entry.start.date()
        entries = self.read_entries_for_date(day)
        entries.append(entry)
        self._save_entries_for_date(day, entries)
        logger.info("Saved '%s' (%.2f h) to %s", entry.label, entry.duration_hours, self.path_for_date(day))

    def _save_entries_for_date(self, day: date, entries: list[Entry]) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        json_adapter.dump(entries, str(self.path_for_date(day)))

    def available_dates(self) -> list[date]:
        if not self.data_dir.is_dir():
            return []

        dates = []
        for path in self.data_dir.glob("*.json"):
            try:
                dates.append(datetime.strptime(path.stem, _DATE_FORMAT).date())
            except ValueError:
                logger.debug("Skipping non-date file %s", path.name)
        return sorted(dates)

    def load_all_entries(self) -> list[Entry]:
        entries: list[Entry] = []
        for day in self.available_dates():
            entries.extend(self.load_entries_for_date(day))
        return entries

    def check_collisions(self, entry: Entry) -> list[Entry]:
        """Entries stored on the candidate's start day that overlap it."""

        if entry.start is None or entry.end is None:
            return []
        return overlap.check_collisions(entry, self.load_entries_for_date(entry.start.date()))

    def last_activity_end_time(self, day: date) -> Optional[datetime]:
        return overlap.last_activity_end_time(self.load_entries_for_date(day))
