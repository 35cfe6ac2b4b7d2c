from __future__ import annotations

from datetime import date
from typing import Optional, Union

import pytest

from src.time_clock.time_clock.attendance.model import AttendanceRecord
from src.time_clock.time_clock.attendance.service import PunchService
from src.time_clock.time_clock.core.config import TimeClockConfig
from src.time_clock.time_clock.core.enums import AttendanceStatus
from src.time_clock.time_clock.employees.model import Employee
from src.time_clock.time_clock.employees.service import EmployeeDirectoryService


class InMemoryEmployees:
    def __init__(self, rows: list[tuple[str, Union[date, str, None]]]):
        self._rows = [Employee(name=n, date_of_birth=d) for n, d in rows]

    def list_employees(self):
        return list(self._rows)

    def find_employee(self, name: str) -> Optional[Employee]:
        for e in self._rows:
            if e.name and e.name.strip() == name.strip():
                return e
        return None


class InMemoryAttendance:
    """Ledger kept as an append-only list of rows; record_id is the 1-based row number."""

    def __init__(self):
        self.rows: list[AttendanceRecord] = []
        self.appends = 0
        self.updates = 0

    def find_today_record(self, employee_name: str, work_date: str) -> Optional[AttendanceRecord]:
        for rec in reversed(self.rows):
            if rec.employee_name.strip() == employee_name.strip() and rec.work_date == work_date:
                return rec
        return None

    def append_record(self, *, employee_name, work_date, punch_in_time, status=AttendanceStatus.IN_PROGRESS) -> int:
        self.appends += 1
        rec = AttendanceRecord(
            record_id=len(self.rows) + 1,
            employee_name=employee_name,
            work_date=work_date,
            punch_in_time=punch_in_time,
            status=status,
        )
        self.rows.append(rec)
        return rec.record_id

    def update_record(self, record_id, *, punch_out_time, total_hours, status) -> bool:
        for i, rec in enumerate(self.rows):
            if rec.record_id == record_id:
                if rec.punch_out_time:
                    return False
                self.updates += 1
                self.rows[i] = AttendanceRecord(
                    record_id=rec.record_id,
                    employee_name=rec.employee_name,
                    work_date=rec.work_date,
                    punch_in_time=rec.punch_in_time,
                    punch_out_time=punch_out_time,
                    total_hours=total_hours,
                    status=status,
                )
                return True
        return False

    def seed(self, **fields) -> AttendanceRecord:
        rec = AttendanceRecord(record_id=len(self.rows) + 1, **fields)
        self.rows.append(rec)
        return rec


DIRECTORY_ROWS = [
    ("John Doe", "1985-03-15"),
    ("Jane Smith", "1990-07-22"),
    ("Peter Jones", date(1988, 11, 8)),
    ("Mary Williams", "1992-01-30"),
]


@pytest.fixture
def employees_repo():
    return InMemoryEmployees(DIRECTORY_ROWS)


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def directory(employees_repo):
    return EmployeeDirectoryService(employees_repo)


@pytest.fixture
def punch_service(attendance_repo, directory):
    return PunchService(attendance_repo, directory, TimeClockConfig())
