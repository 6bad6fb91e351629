"""Bucket ordering rules."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable

from task_dashboard.dates import parse_timestamp
from task_dashboard.schema import Classification, Task


def _due_key(task: Task) -> date:
    # overdue tasks always carry a due date
    return task.due or date.min


def _last_touched_key(task: Task) -> float:
    parsed = parse_timestamp(task.last_touched)
    return float("-inf") if parsed is None else parsed.timestamp()


def sort_overdue(tasks: Iterable[Task]) -> list[Task]:
    """Earliest due date first."""

    return sorted(tasks, key=_due_key)


def sort_active_high_priority(tasks: Iterable[Task]) -> list[Task]:
    """P0 before P1 before lower tiers; input order kept within a tier."""

    return sorted(tasks, key=lambda task: task.tier)


def sort_active_other(tasks: Iterable[Task]) -> list[Task]:
    """Most recently touched first; missing timestamps go last."""

    # reverse=True keeps equal keys in input order
    return sorted(tasks, key=_last_touched_key, reverse=True)


def sort_classification(classification: Classification) -> Classification:
    """Return a copy of ``classification`` with every bucket ordered."""

    return replace(
        classification,
        overdue=tuple(sort_overdue(classification.overdue)),
        active_high_priority=tuple(sort_active_high_priority(classification.active_high_priority)),
        active_other=tuple(sort_active_other(classification.active_other)),
    )
