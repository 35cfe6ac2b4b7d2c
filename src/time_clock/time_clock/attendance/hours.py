from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Any

from ..common.datetime_utils import normalize_time_value
from ..core.enums import AttendanceStatus
from ..core.exceptions import MalformedTimeError

_CLOCK_TIME = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")
_REFERENCE_DAY = date(2000, 1, 1)


def parse_clock_time(value: Any) -> time:
    """Parse 'H:MM' / 'HH:MM' (seconds ignored) into a time of day."""

    text = normalize_time_value(value)
    match = _CLOCK_TIME.match(text)
    if not match:
        raise MalformedTimeError(value)

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise MalformedTimeError(value)
    return time(hour, minute)


def calculate_working_hours(punch_in_time: Any, punch_out_time: Any) -> float:
    """Hours between two clock times, rounded to 2 decimals.

    An out-time earlier than the in-time is taken to be on the next day (overnight shift).
    """

    start = datetime.combine(_REFERENCE_DAY, parse_clock_time(punch_in_time))
    end = datetime.combine(_REFERENCE_DAY, parse_clock_time(punch_out_time))
    if end < start:
        end += timedelta(days=1)
    return round((end - start).total_seconds() / 3600, 2)


def classify_hours(total_hours: float, standard_work_hours: float) -> AttendanceStatus:
    if total_hours >= standard_work_hours:
        return AttendanceStatus.ON_TIME
    return AttendanceStatus.LESS_HOURS
