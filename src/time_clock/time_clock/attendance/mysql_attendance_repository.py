from __future__ import annotations

from typing import Any, Dict, Optional

import mysql.connector

from ..common.datetime_utils import normalize_date_value, normalize_time_value
from ..core.config import TimeClockConfig
from ..core.enums import AttendanceStatus
from ..core.exceptions import PunchConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, quote_identifier
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    total = r.get("total_hours")
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        employee_name=str(r["employee_name"]),
        work_date=normalize_date_value(r["work_date"]),
        punch_in_time=normalize_time_value(r.get("punch_in_time")) or None,
        punch_out_time=normalize_time_value(r.get("punch_out_time")) or None,
        total_hours=float(total) if total is not None and total != "" else None,
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection, config: TimeClockConfig):
        self._conn_factory = conn_factory
        self._table = quote_identifier(config.attendance_table)

    def find_today_record(self, employee_name: str, work_date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT record_id, employee_name, work_date, punch_in_time, punch_out_time, total_hours, status
                FROM {self._table}
                WHERE BINARY TRIM(employee_name) = BINARY %s AND work_date = %s
                ORDER BY record_id DESC
                LIMIT 1
                """,
                (employee_name.strip(), work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_record(r)

    def append_record(
        self,
        *,
        employee_name: str,
        work_date: str,
        punch_in_time: str,
        status: AttendanceStatus = AttendanceStatus.IN_PROGRESS,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO {self._table}(employee_name, work_date, punch_in_time, status)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (employee_name, work_date, punch_in_time, status.value),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            # uq_attendance_employee_day: another request punched in first.
            raise PunchConflictError(f"Attendance record already exists for {employee_name} on {work_date}") from e

    def update_record(
        self,
        record_id: int,
        *,
        punch_out_time: str,
        total_hours: float,
        status: AttendanceStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE {self._table}
                SET punch_out_time=%s, total_hours=%s, status=%s
                WHERE record_id=%s AND punch_out_time IS NULL
                """,
                (punch_out_time, total_hours, status.value, int(record_id)),
            )
            return cur.rowcount > 0
