from __future__ import annotations

import re
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .constants import (
    DEFAULT_ATTENDANCE_TABLE,
    DEFAULT_EMPLOYEE_TABLE,
    DEFAULT_STANDARD_WORK_HOURS,
    DEFAULT_TIMEZONE,
)
from .exceptions import ValidationError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class TimeClockConfig:
    """Runtime settings handed to services and repositories at construction.

    - timezone: IANA name used to derive "today" and the clock time of a punch.
    - standard_work_hours: a finished session at or above this is "On Time".
    - employee_table / attendance_table: table names inside the store.
    """

    timezone: str = DEFAULT_TIMEZONE
    standard_work_hours: float = DEFAULT_STANDARD_WORK_HOURS
    employee_table: str = DEFAULT_EMPLOYEE_TABLE
    attendance_table: str = DEFAULT_ATTENDANCE_TABLE

    def __post_init__(self):
        try:
            hours = float(self.standard_work_hours)
        except (TypeError, ValueError):
            raise ValidationError(f"STANDARD_WORK_HOURS must be a number: {self.standard_work_hours!r}") from None
        if hours <= 0:
            raise ValidationError("STANDARD_WORK_HOURS must be positive")
        for name in (self.employee_table, self.attendance_table):
            if not _IDENTIFIER.match(name or ""):
                raise ValidationError(f"Invalid table name: {name!r}")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValidationError(f"Unknown timezone: {self.timezone!r}") from None

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_settings(cls, settings) -> "TimeClockConfig":
        return cls(
            timezone=str(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)),
            standard_work_hours=float(getattr(settings, "STANDARD_WORK_HOURS", DEFAULT_STANDARD_WORK_HOURS)),
            employee_table=str(getattr(settings, "EMPLOYEE_TABLE", DEFAULT_EMPLOYEE_TABLE)),
            attendance_table=str(getattr(settings, "ATTENDANCE_TABLE", DEFAULT_ATTENDANCE_TABLE)),
        )
