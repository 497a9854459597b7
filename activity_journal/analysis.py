"""Day and lifetime analysis over stored journal entries."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from activity_journal.categories import CategoryNode, build_category_tree, tokenize
from activity_journal.metrics import ConsumingProductiveStats, calculate_stats
from activity_journal.schema import Entry
from activity_journal.store import JournalStore

logger = logging.getLogger(__name__)


def main_activity_hours(entries: Iterable[Entry]) -> dict[str, float]:
    """Cumulative hours per first-level category."""

    return build_category_tree(entries).main_category_hours()


def entries_by_main_category(
    entries: Iterable[Entry],
    main_category: str,
    day: Optional[date] = None,
) -> list[Entry]:
    """Entries whose first label token matches ``main_category``, sorted by start."""

    wanted = tokenize(main_category)[:1]
    if not wanted:
        return []

    matches = []
    for entry in entries:
        tokens = tokenize(entry.label)
        if tokens[:1] != wanted:
            continue
        if day is not None and entry.day != day:
            continue
        matches.append(entry)
    return sorted(matches, key=lambda e: (e.start is None, e.start))


class AnalysisService:
    """Statistics and category views for one day or the whole journal."""

    def __init__(self, store: JournalStore) -> None:
        self.store = store

    def _entries(self, day: Optional[date]) -> list[Entry]:
        if day is None:
            return self.store.load_all_entries()
        return self.store.load_entries_for_date(day)

    def stats_for_date(self, day: date) -> ConsumingProductiveStats:
        return calculate_stats(self.store.load_entries_for_date(day))

    def stats_for_today(self) -> ConsumingProductiveStats:
        return self.stats_for_date(date.today())

    def lifetime_stats(self) -> ConsumingProductiveStats:
        return calculate_stats(self.store.load_all_entries())

    def main_activity_hours(self) -> dict[str, float]:
        return main_activity_hours(self.store.load_all_entries())

    def main_activity_hours_for_date(self, day: date) -> dict[str, float]:
        return main_activity_hours(self.store.load_entries_for_date(day))

    def category_tree(self, day: Optional[date] = None) -> CategoryNode:
        """Root of a freshly built tree for ``day``, or for all days."""

        entries = self._entries(day)
        logger.debug("Building category tree from %d entries", len(entries))
        return build_category_tree(entries).root

    def entries_by_main_category(self, main_category: str, day: Optional[date] = None) -> list[Entry]:
        return entries_by_main_category(self._entries(day), main_category, day=day)
