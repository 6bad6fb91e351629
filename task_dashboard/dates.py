"""Date-only overdue evaluation in a single reference timezone."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Asia/Seoul"


def now(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Current moment as an aware datetime in the reference zone."""

    return datetime.now(ZoneInfo(tz_name))


def today(tz_name: str = DEFAULT_TIMEZONE) -> date:
    return now(tz_name).date()


def _fromisoformat(text: str) -> datetime:
    # fromisoformat() only accepts a trailing Z from 3.11 on
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_due(value: object, tz_name: str = DEFAULT_TIMEZONE) -> Optional[date]:
    """Parse a due value to a calendar date.

    Date-only text is taken as is. Offset-aware datetimes are moved into the
    reference zone before truncation; naive datetimes keep their own date.
    Anything unparseable is treated as no due date.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            parsed = _fromisoformat(text)
        except ValueError:
            logger.debug("Ignoring malformed due date %r", value)
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(ZoneInfo(tz_name))
        except (OverflowError, ValueError):
            logger.debug("Ignoring out of range due date %r", value)
            return None
    return parsed.date()


def parse_timestamp(value: object) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp to an aware datetime; naive values are UTC."""

    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = _fromisoformat(value.strip())
    except ValueError:
        logger.debug("Ignoring malformed timestamp %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_overdue(due: Optional[date], reference_day: date) -> bool:
    """True when ``due`` is strictly before ``reference_day``."""

    if due is None:
        return False
    return due < reference_day


def days_overdue(due: date, reference_day: date) -> int:
    """Whole days between ``due`` and ``reference_day``; at least 1 when overdue."""

    return (reference_day - due).days
