from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_today_record(self, employee_name: str, work_date: str) -> Optional[AttendanceRecord]:
        """Most recently added record for (employee, date), or None.

        Scans newest first so that, if duplicate rows ever exist, the latest write wins.
        """

        raise NotImplementedError

    def append_record(
        self,
        *,
        employee_name: str,
        work_date: str,
        punch_in_time: str,
        status: AttendanceStatus = AttendanceStatus.IN_PROGRESS,
    ) -> int:
        """Insert an open record and return its id.

        Raises PunchConflictError if the store refuses a second row for the same day.
        """

        raise NotImplementedError

    def update_record(
        self,
        record_id: int,
        *,
        punch_out_time: str,
        total_hours: float,
        status: AttendanceStatus,
    ) -> bool:
        """Close an open record in place.

        Returns False when the record is missing or already closed; terminal rows are never overwritten.
        """

        raise NotImplementedError
