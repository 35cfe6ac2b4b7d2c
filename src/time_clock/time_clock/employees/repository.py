from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee directory.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_employees(self) -> Sequence[Employee]:
        """All directory rows, in directory order."""

        raise NotImplementedError

    def find_employee(self, name: str) -> Optional[Employee]:
        """First row whose trimmed name equals the trimmed input (case-sensitive)."""

        raise NotImplementedError
