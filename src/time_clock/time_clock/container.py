from __future__ import annotations

from dataclasses import dataclass

from .attendance.locks import PunchLockRegistry
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import PunchService
from .core.config import TimeClockConfig
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeDirectoryService


@dataclass(frozen=True)
class Container:
    config: TimeClockConfig

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    directory_service: EmployeeDirectoryService
    punch_service: PunchService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    config: TimeClockConfig,
) -> Container:
    directory_service = EmployeeDirectoryService(employees_repo)
    punch_service = PunchService(
        attendance_repo,
        directory_service,
        config,
        locks=PunchLockRegistry(),
    )
    return Container(
        config=config,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        directory_service=directory_service,
        punch_service=punch_service,
    )


def build_container(*, db_config: dict, config: TimeClockConfig) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn, config),
        attendance_repo=MySQLAttendanceRepository(conn, config),
        config=config,
    )
