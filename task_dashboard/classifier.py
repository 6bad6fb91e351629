"""Stats and display buckets for a task collection."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from task_dashboard.dates import DEFAULT_TIMEZONE, is_overdue, today as current_day
from task_dashboard.schema import HIGH_PRIORITY_TIERS, Classification, Stats, Task

logger = logging.getLogger(__name__)


def classify(
    tasks: Iterable[Task],
    today: Optional[date] = None,
    *,
    completion_label: str = "Done",
    tz_name: str = DEFAULT_TIMEZONE,
) -> Classification:
    """Count and bucket tasks in one pass against a single reference day.

    Counters are independent of each other. The overdue bucket ignores status
    and priority, so an overdue task that is also active P0/P1 lands in both
    the overdue and the high priority bucket. Done tasks that are neither
    overdue nor P0/P1 land in no bucket.
    """

    reference_day = current_day(tz_name) if today is None else today

    total = overdue_count = p0 = p1 = p2 = done = 0
    overdue: list[Task] = []
    active_high: list[Task] = []
    active_other: list[Task] = []

    for task in tasks:
        total += 1
        late = is_overdue(task.due, reference_day)
        finished = task.status == completion_label
        high = task.tier in HIGH_PRIORITY_TIERS

        p0 += 1 if task.priority == "P0" else 0
        p1 += 1 if task.priority == "P1" else 0
        p2 += 1 if task.priority == "P2" else 0
        done += 1 if finished else 0

        if late:
            overdue_count += 1
            overdue.append(task)
        if high and not finished:
            active_high.append(task)
        if not finished and not late and not high:
            active_other.append(task)

    stats = Stats(total=total, overdue=overdue_count, p0=p0, p1=p1, p2=p2, done=done)
    logger.info(
        "Classified %d tasks for %s: %d overdue, %d active P0/P1, %d other active",
        total,
        reference_day.isoformat(),
        len(overdue),
        len(active_high),
        len(active_other),
    )
    return Classification(
        today=reference_day,
        stats=stats,
        overdue=tuple(overdue),
        active_high_priority=tuple(active_high),
        active_other=tuple(active_other),
    )
