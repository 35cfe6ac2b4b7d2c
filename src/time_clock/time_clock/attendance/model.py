from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's punches for one work day.

    `record_id` is the storage row identity; a higher id means a later write.
    Dates are YYYY-MM-DD text and clock times HH:MM text, `None` when unset.
    """

    record_id: int
    employee_name: str
    work_date: str
    punch_in_time: Optional[str]
    punch_out_time: Optional[str] = None
    total_hours: Optional[float] = None
    status: AttendanceStatus = AttendanceStatus.IN_PROGRESS

    @property
    def is_open(self) -> bool:
        return bool(self.punch_in_time) and not self.punch_out_time

    @property
    def is_terminal(self) -> bool:
        return bool(self.punch_in_time) and bool(self.punch_out_time)
