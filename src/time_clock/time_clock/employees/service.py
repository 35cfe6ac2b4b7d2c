from __future__ import annotations

import logging
from typing import List, Optional

from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeDirectoryService:
    """Use case: read-only access to the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def lookup_employee(self, name: str) -> Optional[Employee]:
        if name is None or not name.strip():
            return None
        return self._employees.find_employee(name)

    def list_employee_names(self) -> List[str]:
        names = (str(e.name or "").strip() for e in self._employees.list_employees())
        return [n for n in names if n]

    def validate_employee(self, name: str, date_of_birth: str) -> bool:
        """Check a name / date of birth pair against the directory.

        Fails closed: a missing employee, a mismatch, or any error while reading
        the directory all count as "not valid".
        """

        try:
            employee = self.lookup_employee(name)
            if not employee:
                return False
            return employee.date_of_birth_iso == str(date_of_birth or "").strip()
        except Exception:
            logger.exception("Employee validation failed for %r", name)
            return False
