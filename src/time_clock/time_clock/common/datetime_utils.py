from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Optional

from ..core.constants import DATE_FORMAT, TIME_FORMAT

# Text TIME values, optionally with seconds (and fractions) that are dropped.
_TEXT_TIME = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2}(?:\.\d+)?)?$")


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current time in the configured timezone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def format_date(value: datetime) -> str:
    return value.strftime(DATE_FORMAT)


def format_time(value: datetime) -> str:
    return value.strftime(TIME_FORMAT)


def normalize_date_value(value: Any) -> str:
    """Normalize a stored date into YYYY-MM-DD text.

    Structured values (date/datetime) are formatted; anything else is treated as
    text and only trimmed, so '1990-7-22' stays '1990-7-22' and will not match.
    """

    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def normalize_time_value(value: Any) -> str:
    """Normalize a stored clock time into HH:MM text ('' when unset).

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return ""

    if isinstance(value, (time, datetime)):
        return value.strftime(TIME_FORMAT)

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        return f"{hours:02d}:{minutes:02d}"

    text = str(value).strip()
    match = _TEXT_TIME.match(text)
    if match:
        return f"{int(match.group(1)):02d}:{match.group(2)}"
    return text
