import json
from datetime import date

import pytest

from task_dashboard.adapters.notion_adapter import map_record, parse, parse_payload
from task_dashboard.registry import ProjectRegistry
from helpers import notion_page

REGISTRY = ProjectRegistry({"proj-a": "Alpha", "proj-b": "Beta"})


def test_map_record_full_page():
    page = notion_page(
        "page-1",
        name="Ship release",
        status="In Progress",
        priority="P1",
        due="2025-01-05",
        projects=["proj-a", "proj-x"],
        edited="2025-01-02T10:00:00.000Z",
        source="Slack",
    )
    task = map_record(page, REGISTRY)
    assert task.id == "page-1"
    assert task.name == "Ship release"
    assert task.status == "In Progress"
    assert task.priority == "P1"
    assert task.due == date(2025, 1, 5)
    assert task.project == ("Alpha", "Other")
    assert task.last_touched == "2025-01-02T10:00:00.000Z"
    assert task.source == "Slack"


def test_map_record_defaults_for_missing_fields():
    task = map_record({"id": "bare"}, REGISTRY)
    assert task.name == "Untitled"
    assert task.status is None
    assert task.priority is None
    assert task.due is None
    assert task.project == ()
    assert task.last_touched == ""
    assert task.source is None


def test_map_record_null_selects_are_absent_not_text():
    task = map_record(notion_page("p", name="x"), REGISTRY)
    assert task.status is None
    assert task.priority is None
    assert task.source is None


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "garbage",
        {"properties": None},
        {"id": 7, "properties": {"Name": {"title": "not a list"}, "Due": {"date": "2025-01-01"}}},
        {"id": "x", "properties": {"Project": {"relation": None}, "Status": {"select": "P0"}}},
    ],
)
def test_map_record_never_fails_on_malformed_input(raw):
    task = map_record(raw, REGISTRY)
    assert task.name == "Untitled"
    assert task.status is None
    assert task.due is None
    assert task.project == ()


def test_map_record_malformed_due_is_absent():
    task = map_record(notion_page("p", due="next tuesday"), REGISTRY)
    assert task.due is None


def test_map_record_due_datetime_truncated_in_reference_zone():
    # 20:00 UTC on Jan 4 is already Jan 5 in Seoul
    page = notion_page("p", due="2025-01-04T20:00:00.000+00:00")
    assert map_record(page, REGISTRY).due == date(2025, 1, 5)
    assert map_record(page, REGISTRY, tz_name="UTC").due == date(2025, 1, 4)


def test_parse_payload_skips_non_objects_and_handles_empty():
    payload = {"results": [notion_page("a", name="A"), "junk", notion_page("b", name="B")]}
    tasks = parse_payload(payload, REGISTRY)
    assert [task.id for task in tasks] == ["a", "b"]
    assert parse_payload({"results": []}, REGISTRY) == []
    assert parse_payload({}, REGISTRY) == []
    assert parse_payload([notion_page("c")], REGISTRY)[0].id == "c"


def test_parse_reads_export_file(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"results": [notion_page("a", name="Alpha task", projects=["proj-b"])]}), encoding="utf-8")
    tasks = parse(str(path), REGISTRY)
    assert len(tasks) == 1
    assert tasks[0].project == ("Beta",)


def test_parse_malformed_file(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        parse(str(path), REGISTRY)


@pytest.mark.parametrize("due", ["0001-01-01T00:00:00+14:00", "9999-12-31T20:00:00-10:00"])
def test_map_record_due_at_date_range_edges_is_absent(due):
    task = map_record(notion_page("p", name="Edge", due=due), REGISTRY)
    assert task.name == "Edge"
    assert task.due is None
