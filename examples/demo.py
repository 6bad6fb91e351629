"""Demo script for task-dashboard."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_dashboard.adapters.notion_adapter import parse
from task_dashboard.classifier import classify
from task_dashboard.registry import ProjectRegistry
from task_dashboard.sorting import sort_classification


def main() -> None:
    tasks = parse("examples/sample_export.json", ProjectRegistry.default())
    result = sort_classification(classify(tasks))
    print("Stats:", result.stats.as_dict())
    print("Overdue:", [task.name for task in result.overdue])
    print("P0/P1:", [task.name for task in result.active_high_priority])
    print("Other:", [task.name for task in result.active_other])


if __name__ == "__main__":
    main()
