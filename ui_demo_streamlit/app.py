"""Streamlit dashboard for task-dashboard."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from task_dashboard.config import get_default_config
from task_dashboard.dashboard import DashboardView, TaskRow, build_dashboard

DEMO_EXPORT = Path(__file__).resolve().parents[1] / "examples" / "sample_export.json"

STAT_CARDS = [
    ("Total Tasks", "total"),
    ("Overdue", "overdue"),
    ("P0 Critical", "p0"),
    ("P1 High", "p1"),
    ("P2 Medium", "p2"),
    ("Completed", "done"),
]


def _load_payload(uploaded_file) -> Any:
    try:
        return json.loads(uploaded_file.getvalue().decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"{uploaded_file.name} is not a JSON export") from exc


def _row_table(rows: tuple[TaskRow, ...]) -> list[dict]:
    table = []
    for row in rows:
        task = row.task
        table.append(
            {
                "Task": task.name,
                "Overdue": f"{row.days_overdue}d overdue" if row.is_overdue else "",
                "Project": row.project_label,
                "Due": row.due_label or "",
                "Source": task.source or "",
                "Status": task.status or "No Status",
                "Priority": task.priority or "No Priority",
            }
        )
    return table


def render(view: DashboardView) -> None:
    import streamlit as st

    stats = view.stats.as_dict()
    for column, (label, key) in zip(st.columns(len(STAT_CARDS)), STAT_CARDS):
        column.metric(label, stats[key])

    if view.overdue:
        st.subheader(f"Overdue Tasks ({len(view.overdue)})")
        st.table(_row_table(view.overdue))

    left, right = st.columns(2)
    left.subheader(f"P0/P1 Priorities ({len(view.active_high_priority)})")
    if view.active_high_priority:
        left.table(_row_table(view.active_high_priority))
    else:
        left.info("No active P0/P1 tasks")

    total_other = len(view.active_other) + view.hidden_other_count
    right.subheader(f"Other Tasks ({total_other})")
    if view.active_other:
        right.table(_row_table(view.active_other))
    else:
        right.info("No other pending tasks")
    if view.hidden_other_count:
        right.caption(f"+{view.hidden_other_count} more tasks")


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Ops HQ Dashboard", layout="wide")
    st.title("Ops HQ Dashboard")

    config = get_default_config()
    with st.sidebar:
        st.header("Data")
        uploaded = st.file_uploader("Upload Notion export", type=["json"])
        use_demo = st.checkbox("Load demo export", value=True)

    try:
        if uploaded is not None and not use_demo:
            payload = _load_payload(uploaded)
        elif use_demo:
            with open(DEMO_EXPORT, encoding="utf-8") as handle:
                payload = json.load(handle)
        else:
            st.info("Upload a JSON export or enable 'Load demo export'.")
            return

        view = build_dashboard(payload, config)
    except (OSError, ValueError) as exc:
        st.error(f"Input error: {exc}")
        return

    st.caption(f"Last updated: {view.generated_at:%b %d, %H:%M} ({config['timezone']})")
    render(view)


if __name__ == "__main__":
    main()
