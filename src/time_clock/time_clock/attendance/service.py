from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import format_date, format_time, now_local
from ..common.validators import require_choice, require_non_empty
from ..core.config import TimeClockConfig
from ..core.enums import AttendanceStatus, PunchType
from ..core.exceptions import (
    AuthenticationError,
    DuplicatePunchError,
    MissingPunchInError,
    PunchConflictError,
    ValidationError,
)
from ..employees.service import EmployeeDirectoryService
from .hours import calculate_working_hours, classify_hours
from .locks import PunchLockRegistry
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PunchResult:
    message: str
    record: AttendanceRecord


class PunchService:
    """Use case: punch an employee in or out for today.

    Record life cycle per (employee, day): none -> "In Progress" on punch-in ->
    "On Time"/"Less Hours" on punch-out. Terminal records are never rewritten.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        directory: EmployeeDirectoryService,
        config: TimeClockConfig | None = None,
        *,
        locks: PunchLockRegistry | None = None,
    ):
        self._attendance = attendance
        self._directory = directory
        self._config = config or TimeClockConfig()
        self._locks = locks or PunchLockRegistry()

    def punch(
        self,
        employee_name: str,
        date_of_birth: str,
        punch_type: str,
        *,
        now: datetime | None = None,
    ) -> PunchResult:
        try:
            employee_name = require_non_empty(employee_name, "employeeName")
            date_of_birth = require_non_empty(date_of_birth, "dateOfBirth")
            punch_type = require_non_empty(punch_type, "punchType")
        except ValidationError:
            raise ValidationError("Missing required parameters.") from None

        try:
            kind = PunchType(require_choice(punch_type, "punchType", [p.value for p in PunchType]))
        except ValidationError:
            raise ValidationError("Invalid punch type.") from None

        if not self._directory.validate_employee(employee_name, date_of_birth):
            logger.warning("Rejected punch-%s for unknown employee or wrong date of birth: %r", kind.value, employee_name)
            raise AuthenticationError("Employee not found or date of birth is incorrect.")

        now = now or now_local(self._config.tzinfo)
        if kind == PunchType.IN:
            return self.punch_in(employee_name, now=now)
        return self.punch_out(employee_name, now=now)

    def punch_in(self, employee_name: str, *, now: datetime) -> PunchResult:
        work_date, clock = format_date(now), format_time(now)

        with self._locks.hold(employee_name, work_date):
            existing = self._attendance.find_today_record(employee_name, work_date)
            if existing and existing.punch_in_time:
                raise self._already_in(existing)

            try:
                record_id = self._attendance.append_record(
                    employee_name=employee_name,
                    work_date=work_date,
                    punch_in_time=clock,
                    status=AttendanceStatus.IN_PROGRESS,
                )
            except PunchConflictError:
                winner = self._attendance.find_today_record(employee_name, work_date)
                if winner and winner.punch_in_time:
                    raise self._already_in(winner) from None
                raise

        logger.info("Punch-in recorded for %s on %s at %s", employee_name, work_date, clock)
        record = AttendanceRecord(
            record_id=record_id,
            employee_name=employee_name,
            work_date=work_date,
            punch_in_time=clock,
        )
        return PunchResult(f"Punch-in successful at {clock}.", record)

    def punch_out(self, employee_name: str, *, now: datetime) -> PunchResult:
        work_date, clock = format_date(now), format_time(now)

        with self._locks.hold(employee_name, work_date):
            record = self._attendance.find_today_record(employee_name, work_date)
            if not record or not record.punch_in_time:
                logger.warning("Punch-out without punch-in for %s on %s", employee_name, work_date)
                raise MissingPunchInError("No punch-in record found for today. Please punch in first.")
            if record.punch_out_time:
                raise self._already_out(record)

            total_hours = calculate_working_hours(record.punch_in_time, clock)
            status = classify_hours(total_hours, self._config.standard_work_hours)

            updated = self._attendance.update_record(
                record.record_id,
                punch_out_time=clock,
                total_hours=total_hours,
                status=status,
            )
            if not updated:
                latest = self._attendance.find_today_record(employee_name, work_date)
                if latest and latest.punch_out_time:
                    raise self._already_out(latest)
                raise PunchConflictError("Attendance record changed during punch-out. Please try again.")

        logger.info(
            "Punch-out recorded for %s on %s at %s (%.2f h, %s)",
            employee_name, work_date, clock, total_hours, status.value,
        )
        closed = AttendanceRecord(
            record_id=record.record_id,
            employee_name=record.employee_name,
            work_date=record.work_date,
            punch_in_time=record.punch_in_time,
            punch_out_time=clock,
            total_hours=total_hours,
            status=status,
        )
        return PunchResult(
            f"Punch-out successful at {clock}. Total hours: {total_hours:.2f} ({status.value})",
            closed,
        )

    def _already_in(self, record: AttendanceRecord) -> DuplicatePunchError:
        logger.warning("Duplicate punch-in for %s on %s", record.employee_name, record.work_date)
        return DuplicatePunchError(f"You already punched in today at {record.punch_in_time}.")

    def _already_out(self, record: AttendanceRecord) -> DuplicatePunchError:
        logger.warning("Duplicate punch-out for %s on %s", record.employee_name, record.work_date)
        return DuplicatePunchError(f"You already punched out today at {record.punch_out_time}.")
