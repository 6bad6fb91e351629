"""Core data schema for normalized tasks."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from enum import IntEnum
from typing import Optional


class PriorityTier(IntEnum):
    """Total order over priority labels, most urgent first."""

    P0 = 0
    P1 = 1
    P2 = 2
    P3 = 3
    ABSENT = 4

    @classmethod
    def from_label(cls, label: Optional[str]) -> "PriorityTier":
        if label in ("P0", "P1", "P2", "P3"):
            return cls[label]
        return cls.ABSENT


HIGH_PRIORITY_TIERS = frozenset({PriorityTier.P0, PriorityTier.P1})


@dataclass(frozen=True)
class Task:
    """Normalized task record used by all modules."""

    id: str
    name: str
    status: Optional[str]
    priority: Optional[str]
    due: Optional[date]
    project: tuple[str, ...]
    last_touched: str
    source: Optional[str]

    @property
    def tier(self) -> PriorityTier:
        return PriorityTier.from_label(self.priority)


@dataclass(frozen=True)
class Stats:
    """Aggregate counters for one classification pass."""

    total: int = 0
    overdue: int = 0
    p0: int = 0
    p1: int = 0
    p2: int = 0
    done: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Classification:
    """Stats plus the three display buckets, evaluated against one reference day."""

    today: date
    stats: Stats
    overdue: tuple[Task, ...]
    active_high_priority: tuple[Task, ...]
    active_other: tuple[Task, ...]
