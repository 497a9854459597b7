"""Streamlit dashboard for activity-journal."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from activity_journal.analysis import AnalysisService
from activity_journal.categories import CategoryNode
from activity_journal.config import get_config
from activity_journal.formatting import sorted_by_hours
from activity_journal.overlap import check_collisions, suggest_next_interval
from activity_journal.schema import Entry
from activity_journal.store import JournalStore


def run_analysis(store: JournalStore, day: Optional[date]) -> dict[str, Any]:
    """Collect stats, main categories and the tree for the day (or lifetime)."""

    service = AnalysisService(store)
    if day is None:
        stats = service.lifetime_stats()
        activities = service.main_activity_hours()
    else:
        stats = service.stats_for_date(day)
        activities = service.main_activity_hours_for_date(day)

    return {
        "stats": stats,
        "activities": sorted_by_hours(activities),
        "tree_rows": tree_rows(service.category_tree(day)),
    }


def tree_rows(root: CategoryNode) -> list[dict]:
    rows = []
    stack = sorted(root.children_list(), key=lambda c: c.cumulative_hours)
    while stack:
        node = stack.pop()
        rows.append({"category": node.full_path, "depth": node.depth, "hours": round(node.cumulative_hours, 2)})
        stack.extend(sorted(node.children_list(), key=lambda c: c.cumulative_hours))
    return rows


def _entry_rows(entries: list[Entry]) -> list[dict]:
    return [
        {
            "date": entry.start.strftime("%Y-%m-%d"),
            "start": entry.start.strftime("%H:%M"),
            "end": entry.end.strftime("%H:%M"),
            "activity": entry.label,
            "hours": round(entry.duration_hours, 2),
            "consuming": "Yes" if entry.is_consuming else "No",
            "productive": "Yes" if entry.is_productive else "No",
            "note": entry.note or "-",
        }
        for entry in entries
        if entry.start is not None and entry.end is not None
    ]


def main() -> None:
    import streamlit as st

    config = get_config()
    store = JournalStore(config.data_dir)

    st.set_page_config(page_title="Activity Journal", layout="wide")
    st.title("Activity Journal")

    with st.sidebar:
        st.header("View")
        dates = store.available_dates()
        lifetime = st.radio("Scope", options=["Day", "Lifetime"], index=0) == "Lifetime"
        selected_day = None
        if not lifetime:
            if dates:
                selected_day = st.selectbox("Date", options=list(reversed(dates)), format_func=str)
            else:
                st.info("No data available")

    analysis_tab, add_tab = st.tabs(["Analysis", "Add activity"])

    with analysis_tab:
        if not lifetime and selected_day is None:
            st.info("Add an activity to start analysing.")
        else:
            result = run_analysis(store, None if lifetime else selected_day)
            stats = result["stats"]
            c1, c2, c3 = st.columns(3)
            c1.metric("Consuming", f"{stats.consuming_hours:.2f} h", f"{stats.consuming_percentage:.1f}%")
            c2.metric("Productive", f"{stats.productive_hours:.2f} h", f"{stats.productive_percentage:.1f}%")
            c3.metric("Total", f"{stats.total_hours:.2f} h")

            st.subheader("Main activities")
            if result["activities"]:
                st.table([{"activity": label, "hours": round(hours, 2)} for label, hours in result["activities"]])
                chosen = st.selectbox("Show entries for", options=[label for label, _ in result["activities"]])
                service = AnalysisService(store)
                st.dataframe(_entry_rows(service.entries_by_main_category(chosen, day=selected_day)))
            else:
                st.write("No activities recorded.")

            st.subheader("Category tree")
            st.dataframe(result["tree_rows"])

    with add_tab:
        target_day = st.date_input("Day", value=date.today())
        suggested_start, suggested_end = suggest_next_interval(
            store.load_entries_for_date(target_day),
            target_day,
            datetime.now().replace(second=0, microsecond=0),
            default_duration_hours=config.default_duration_hours,
        )
        s1, s2, e1, e2 = st.columns(4)
        start_date = s1.date_input("Start date", value=suggested_start.date())
        start_time = s2.time_input("Start time", value=suggested_start.time())
        end_date = e1.date_input("End date", value=suggested_end.date())
        end_time = e2.time_input("End time", value=suggested_end.time())
        start = datetime.combine(start_date, start_time)
        end = datetime.combine(end_date, end_time)

        label = st.text_input("Activity", placeholder="e.g. work email")
        is_consuming = st.checkbox("Consuming")
        is_productive = st.checkbox("Productive")
        note = st.text_area("Note")

        if end <= start:
            st.error("End time must be after start time.")
        else:
            probe = Entry(start=start, end=end, label="")
            collisions = check_collisions(probe, store.load_entries_for_date(start.date()))
            if collisions:
                st.warning(f"This activity overlaps with {len(collisions)} existing entries.")
                st.table(_entry_rows(collisions))
            else:
                st.success("No collisions detected.")

        if st.button("Add activity", type="primary"):
            entry = Entry(
                start=start,
                end=end,
                label=label.strip(),
                is_consuming=is_consuming,
                is_productive=is_productive,
                note=note.strip(),
            )
            try:
                store.save_entry(entry)
            except ValueError as exc:
                st.error(f"Input error: {exc}")
            else:
                st.success(f"Activity added ({entry.duration_hours:.2f} hours).")


if __name__ == "__main__":
    main()
