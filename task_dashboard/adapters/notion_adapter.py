"""Notion export adapter for normalized tasks."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from task_dashboard.dates import DEFAULT_TIMEZONE, parse_due
from task_dashboard.registry import ProjectRegistry
from task_dashboard.schema import Task

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


def _dig(record: Any, *path: Any) -> Any:
    current = record
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or len(current) <= key:
                return None
        elif not isinstance(current, dict):
            return None
        current = current[key] if isinstance(key, int) else current.get(key)
    return current


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _select_name(properties: Any, field: str) -> Optional[str]:
    return _text(_dig(properties, field, "select", "name"))


def map_record(
    raw: Any,
    registry: ProjectRegistry,
    tz_name: str = DEFAULT_TIMEZONE,
) -> Task:
    """Map one raw Notion page to a Task; absent fields fall back to defaults."""

    properties = _dig(raw, "properties")

    relations = _dig(properties, "Project", "relation")
    if isinstance(relations, list):
        project = tuple(registry.resolve(_dig(ref, "id")) for ref in relations)
    else:
        project = ()

    record_id = _dig(raw, "id")
    return Task(
        id="" if record_id is None else str(record_id),
        name=_text(_dig(properties, "Name", "title", 0, "plain_text")) or UNTITLED,
        status=_select_name(properties, "Status"),
        priority=_select_name(properties, "Priority"),
        due=parse_due(_dig(properties, "Due", "date", "start"), tz_name),
        project=project,
        last_touched=_text(_dig(properties, "Last Touched", "last_edited_time")) or "",
        source=_select_name(properties, "Source"),
    )


def parse_payload(
    payload: Any,
    registry: ProjectRegistry,
    tz_name: str = DEFAULT_TIMEZONE,
) -> list[Task]:
    """Map a whole export batch (``{"results": [...]}`` or a bare list)."""

    records = payload.get("results") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        logger.warning("Export payload has no results list; treating it as empty")
        return []

    tasks: list[Task] = []
    for index, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            logger.warning("Skipping record %d: expected an object, got %s", index, type(record).__name__)
            continue
        tasks.append(map_record(record, registry, tz_name))

    logger.info("Mapped %d of %d exported records", len(tasks), len(records))
    return tasks


def parse(
    file_path: str,
    registry: ProjectRegistry,
    tz_name: str = DEFAULT_TIMEZONE,
) -> list[Task]:
    """Parse a Notion JSON export file into normalized tasks."""

    with open(file_path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{file_path}: malformed JSON export") from exc

    return parse_payload(payload, registry, tz_name)
