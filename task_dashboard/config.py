"""Configuration management."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from task_dashboard.dates import DEFAULT_TIMEZONE
from task_dashboard.registry import DEFAULT_PROJECTS, FALLBACK_PROJECT, ProjectRegistry

COMPLETION_LABEL = "Done"
OTHER_TASKS_LIMIT = 10


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'timezone': DEFAULT_TIMEZONE,
        'completion_label': COMPLETION_LABEL,
        'projects': dict(DEFAULT_PROJECTS),
        'fallback_project': FALLBACK_PROJECT,
        'display': {
            'other_tasks_limit': OTHER_TASKS_LIMIT,
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        # the project table is replaced wholesale, not merged entry by entry
        if key != 'projects' and isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file, layered over the defaults."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            loaded = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            loaded = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return merge_config(loaded)


def validate_config(config: Dict[str, Any]) -> None:
    """Raise ValueError for settings the pipeline cannot run with."""
    try:
        ZoneInfo(config['timezone'])
    except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
        raise ValueError(f"Unknown timezone: {config.get('timezone')!r}") from exc

    if not isinstance(config.get('projects'), dict):
        raise ValueError("'projects' must map project ids to names")

    display = config.get('display')
    if not isinstance(display, dict):
        raise ValueError("'display' must be a mapping")
    limit = display.get('other_tasks_limit')
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 0:
        raise ValueError("'display.other_tasks_limit' must be a non-negative integer")


def merge_config(overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Layer a partial configuration mapping over the defaults and validate it."""
    config = _merge(get_default_config(), overrides)
    validate_config(config)
    return config


def build_registry(config: Dict[str, Any]) -> ProjectRegistry:
    """Build the project registry once from configuration."""
    return ProjectRegistry(config['projects'], fallback=config['fallback_project'])
