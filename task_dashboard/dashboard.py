"""End-to-end dashboard view: export batch in, ordered display rows out."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

from task_dashboard.adapters.notion_adapter import parse_payload
from task_dashboard.classifier import classify
from task_dashboard.config import build_registry, get_default_config, merge_config
from task_dashboard.dates import days_overdue, is_overdue, now as current_moment
from task_dashboard.schema import Stats, Task
from task_dashboard.sorting import sort_classification

NO_PROJECT = "No Project"


@dataclass(frozen=True)
class TaskRow:
    """One task plus the values a list row shows next to it."""

    task: Task
    is_overdue: bool
    days_overdue: int
    project_label: str
    due_label: Optional[str]

    def as_dict(self) -> dict:
        task = self.task
        return {
            "id": task.id,
            "name": task.name,
            "status": task.status,
            "priority": task.priority,
            "due": task.due.isoformat() if task.due else None,
            "project": list(task.project),
            "last_touched": task.last_touched,
            "source": task.source,
            "is_overdue": self.is_overdue,
            "days_overdue": self.days_overdue,
            "project_label": self.project_label,
            "due_label": self.due_label,
        }


@dataclass(frozen=True)
class DashboardView:
    generated_at: datetime
    stats: Stats
    overdue: tuple[TaskRow, ...]
    active_high_priority: tuple[TaskRow, ...]
    active_other: tuple[TaskRow, ...]
    hidden_other_count: int

    def as_dict(self) -> dict:
        return {
            "generated_at": self.generated_at.isoformat(),
            "stats": self.stats.as_dict(),
            "overdue": [row.as_dict() for row in self.overdue],
            "active_high_priority": [row.as_dict() for row in self.active_high_priority],
            "active_other": [row.as_dict() for row in self.active_other],
            "hidden_other_count": self.hidden_other_count,
        }


def _row(task: Task, reference_day) -> TaskRow:
    late = is_overdue(task.due, reference_day)
    return TaskRow(
        task=task,
        is_overdue=late,
        days_overdue=days_overdue(task.due, reference_day) if late else 0,
        project_label=", ".join(task.project) or NO_PROJECT,
        due_label=f"{task.due:%b} {task.due.day}" if task.due else None,
    )


def build_dashboard(
    payload: Any,
    config: Optional[dict] = None,
    now: Optional[datetime] = None,
) -> DashboardView:
    """Map, classify and order one export batch against a single captured moment."""

    config = merge_config(config) if config else get_default_config()
    tz_name = config["timezone"]
    zone = ZoneInfo(tz_name)

    if now is None:
        moment = current_moment(tz_name)
    elif now.tzinfo is None:
        moment = now.replace(tzinfo=zone)
    else:
        moment = now.astimezone(zone)
    reference_day = moment.date()

    tasks = parse_payload(payload, build_registry(config), tz_name)
    classification = sort_classification(
        classify(
            tasks,
            reference_day,
            completion_label=config["completion_label"],
            tz_name=tz_name,
        )
    )

    limit = config["display"]["other_tasks_limit"]
    other = classification.active_other
    return DashboardView(
        generated_at=moment,
        stats=classification.stats,
        overdue=tuple(_row(task, reference_day) for task in classification.overdue),
        active_high_priority=tuple(_row(task, reference_day) for task in classification.active_high_priority),
        active_other=tuple(_row(task, reference_day) for task in other[:limit]),
        hidden_other_count=max(0, len(other) - limit),
    )
