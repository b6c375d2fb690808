from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import AttendanceStatus, RecordStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """One generated day of attendance.

    `check_in` is "" when not applicable. `check_out` is None when not set,
    which is distinct from "" and covers both absences and days that are still open.
    """

    date: str
    check_in: str
    check_out: Optional[str]
    status: AttendanceStatus

    @property
    def is_open(self) -> bool:
        """Checked in but not yet checked out."""
        return bool(self.check_in) and self.check_out is None


@dataclass(frozen=True)
class AttendanceSummary:
    total_working_days: int
    present_days: int
    late_days: int
    absent_days: int
    attendance_rate: int


@dataclass(frozen=True)
class AttendanceRecord:
    """Row of the `attendance` table."""

    record_id: str
    employee_code: str
    work_date: date
    status: RecordStatus
    time_in: Optional[time] = None
    time_out: Optional[time] = None
    inserted_at: Optional[datetime] = None
