from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from ..common.datetime_utils import normalize_date_value


@dataclass(frozen=True)
class Employee:
    """Domain entity: a row of the employee directory.

    Note: Plain data object. The directory is maintained by an administrator;
    the punch workflow only reads it.
    """

    name: str
    date_of_birth: Union[date, str, None]

    @property
    def date_of_birth_iso(self) -> str:
        return normalize_date_value(self.date_of_birth)
