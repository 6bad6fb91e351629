"""Summarize a Notion task export as dashboard JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime, time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_dashboard.config import get_default_config, load_config
from task_dashboard.dashboard import build_dashboard


def _parse_today(value: str) -> datetime:
    try:
        return datetime.combine(date.fromisoformat(value), time(hour=12))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarize a Notion task export")
    parser.add_argument("--data", required=True, help="Path to the JSON export")
    parser.add_argument("--config", help="Optional YAML/JSON config file")
    parser.add_argument("--today", type=_parse_today, help="Evaluate as of this date (YYYY-MM-DD)")
    parser.add_argument("--output", help="Also write the summary to this path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else get_default_config()
        payload = json.loads(Path(args.data).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        parser.exit(2, f"error: {exc}\n")

    view = build_dashboard(payload, config, now=args.today)
    report = json.dumps(view.as_dict(), indent=2, ensure_ascii=False)
    print(report)

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(report, encoding="utf-8")
        print(f"Saved summary to {out_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
