"""Plain-text rendering of analysis results."""

from __future__ import annotations

from datetime import date
from typing import Optional

from activity_journal.categories import CategoryNode
from activity_journal.metrics import ConsumingProductiveStats
from activity_journal.schema import Entry

_TIME_FORMAT = "%Y-%m-%d %H:%M"


def _fmt_time(value) -> str:
    return value.strftime(_TIME_FORMAT) if value is not None else "N/A"


def sorted_by_hours(activities: dict[str, float]) -> list[tuple[str, float]]:
    return sorted(activities.items(), key=lambda item: (-item[1], item[0]))


def format_entry(entry: Entry) -> str:
    return (
        f"Activity: {entry.label} | {_fmt_time(entry.start)} - {_fmt_time(entry.end)} | "
        f"Consuming: {entry.is_consuming} | Productive: {entry.is_productive} | "
        f"Duration: {entry.duration_hours:.2f} hours"
    )


def format_report(
    stats: ConsumingProductiveStats,
    activities: dict[str, float],
    day: Optional[date] = None,
) -> str:
    lines = [f"Date: {day.isoformat()}" if day is not None else "View: Lifetime Statistics", ""]
    lines.append("=== Consuming vs Productive Breakdown ===")
    lines.append(f"Consuming:  {stats.consuming_hours:.2f} hours ({stats.consuming_percentage:.1f}%)")
    lines.append(f"Productive: {stats.productive_hours:.2f} hours ({stats.productive_percentage:.1f}%)")
    lines.append(f"Total:      {stats.total_hours:.2f} hours")
    lines.append("")
    lines.append("=== Main Activities (sorted by time) ===")
    if not activities:
        lines.append("No activities recorded.")
    for label, hours in sorted_by_hours(activities):
        lines.append(f"{label:<25} {hours:8.2f} hours")
    return "\n".join(lines)


def format_tree(root: CategoryNode, max_depth: Optional[int] = None) -> str:
    """Indented tree with children sorted by hours, root excluded."""

    lines: list[str] = []

    def _render(node: CategoryNode, depth: int) -> None:
        if max_depth is not None and depth > max_depth:
            return
        lines.append(f"{'  ' * (depth - 1)}{node.token} ({node.cumulative_hours:.2f} h)")
        for child in sorted(node.children_list(), key=lambda c: (-c.cumulative_hours, c.token)):
            _render(child, depth + 1)

    for child in sorted(root.children_list(), key=lambda c: (-c.cumulative_hours, c.token)):
        _render(child, 1)
    return "\n".join(lines)


def format_collisions(collisions: list[Entry]) -> str:
    if not collisions:
        return "No collisions detected."

    lines = ["WARNING: This activity overlaps with existing entries:", ""]
    for i, entry in enumerate(collisions, start=1):
        lines.append(f"{i}. {entry.label}")
        lines.append(f"   Time: {_fmt_time(entry.start)} - {_fmt_time(entry.end)}")
        lines.append(f"   Duration: {entry.duration_hours:.2f} hours")
    return "\n".join(lines)
