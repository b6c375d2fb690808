from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Row of the `employees` table. `id` is the employee code, e.g. K14050."""

    id: str
    name: str
    department: str
    position: str
    profile_image: str
    join_date: date
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    email: Optional[str] = None
    phone: Optional[str] = None
