from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Direction of a punch request."""

    IN = "in"
    OUT = "out"


class AttendanceStatus(str, Enum):
    """Status stored in the attendance ledger.

    IN_PROGRESS marks an open record; the other two are terminal.
    """

    IN_PROGRESS = "In Progress"
    ON_TIME = "On Time"
    LESS_HOURS = "Less Hours"
