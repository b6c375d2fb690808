from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import date

from ..core.constants import (
    ADMIN_ABSENT_RATIO,
    ADMIN_LATE_RATIO,
    ADMIN_ON_LEAVE_RATIO,
    ADMIN_PRESENT_RATIO,
    QUICK_STATS_ABSENT_RATIO,
    QUICK_STATS_PERSONAL_RATIO,
    QUICK_STATS_SICK_RATIO,
    QUICK_STATS_WORKED_RATIO,
)
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository


@dataclass(frozen=True)
class QuickStats:
    days_worked: int
    sick_holidays: int
    personal_leaves: int
    absent_days: int
    total_days: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AdminStats:
    total_employees: int
    present_today: int
    late_today: int
    absent_today: int
    on_leave_today: int

    def to_dict(self) -> dict:
        return asdict(self)


def _share(total: int, ratio: float) -> int:
    return math.floor(total * ratio)


class DashboardService:
    """Estimated figures for the employee and admin dashboards."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def quick_stats(self, date_from: date, date_to: date) -> QuickStats:
        if date_from > date_to:
            raise ValidationError("Start date must be on or before end date")

        days = (date_to - date_from).days + 1
        worked = _share(days, QUICK_STATS_WORKED_RATIO)
        sick = _share(days, QUICK_STATS_SICK_RATIO)
        personal = _share(days, QUICK_STATS_PERSONAL_RATIO)
        absent = _share(days, QUICK_STATS_ABSENT_RATIO)
        return QuickStats(
            days_worked=worked,
            sick_holidays=sick,
            personal_leaves=personal,
            absent_days=absent,
            total_days=worked + sick + personal + absent,
        )

    def admin_stats(self) -> AdminStats:
        total = self._employees.count()
        return AdminStats(
            total_employees=total,
            present_today=_share(total, ADMIN_PRESENT_RATIO),
            late_today=_share(total, ADMIN_LATE_RATIO),
            absent_today=_share(total, ADMIN_ABSENT_RATIO),
            on_leave_today=_share(total, ADMIN_ON_LEAVE_RATIO),
        )
