from __future__ import annotations

from typing import Optional, Sequence

from ..core.config import TimeClockConfig
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, quote_identifier
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection, config: TimeClockConfig):
        self._conn_factory = conn_factory
        self._table = quote_identifier(config.employee_table)

    def list_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_name, date_of_birth
                FROM {self._table}
                ORDER BY employee_id ASC
                """
            )
            return [
                Employee(name=str(r["employee_name"] or ""), date_of_birth=r.get("date_of_birth"))
                for r in fetchall(cur)
            ]

    def find_employee(self, name: str) -> Optional[Employee]:
        # TRIM on both sides keeps the match whitespace-insensitive; BINARY keeps it case-sensitive.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_name, date_of_birth
                FROM {self._table}
                WHERE BINARY TRIM(employee_name) = BINARY %s
                ORDER BY employee_id ASC
                LIMIT 1
                """,
                (name.strip(),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(name=str(r["employee_name"]), date_of_birth=r.get("date_of_birth"))
