from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence


@dataclass(frozen=True)
class ApiResponse:
    """Uniform result envelope returned by every entry point.

    `employees` is only serialized for the directory listing.
    """

    success: bool
    message: str
    employees: Optional[Sequence[str]] = None

    @classmethod
    def ok(cls, message: str, *, employees: Optional[Sequence[str]] = None) -> "ApiResponse":
        return cls(True, message, employees)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse":
        return cls(False, message)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.employees is not None:
            out["employees"] = list(self.employees)
        return out
