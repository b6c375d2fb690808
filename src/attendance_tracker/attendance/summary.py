from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceEntry, AttendanceSummary

NON_WORKING = frozenset({AttendanceStatus.WEEKEND, AttendanceStatus.HOLIDAY})


def rate_percent(part: int, whole: int) -> int:
    """Integer percentage rounded half up; 0 when `whole` is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


class AttendanceSummaryCalculator:
    """Reduces attendance entries into counts and an attendance rate.

    Status counts are taken over the whole input, independently of the
    working-day count. A holiday is excluded from working days but is not
    counted anywhere else.
    """

    def summarize(self, entries: Iterable[AttendanceEntry]) -> AttendanceSummary:
        total_working_days = 0
        counts = {AttendanceStatus.PRESENT: 0, AttendanceStatus.LATE: 0, AttendanceStatus.ABSENT: 0}

        for entry in entries:
            if entry.status not in NON_WORKING:
                total_working_days += 1
            if entry.status in counts:
                counts[entry.status] += 1

        present = counts[AttendanceStatus.PRESENT]
        late = counts[AttendanceStatus.LATE]
        return AttendanceSummary(
            total_working_days=total_working_days,
            present_days=present,
            late_days=late,
            absent_days=counts[AttendanceStatus.ABSENT],
            attendance_rate=rate_percent(present + late, total_working_days),
        )


def calculate_attendance_summary(entries: Iterable[AttendanceEntry]) -> AttendanceSummary:
    return AttendanceSummaryCalculator().summarize(entries)
