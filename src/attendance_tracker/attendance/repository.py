from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import RecordStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_records(
        self,
        *,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        employee_code: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Newest first."""

        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_code: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_code: str,
        work_date: date,
        status: RecordStatus,
        time_in: Optional[time] = None,
        time_out: Optional[time] = None,
    ) -> str:
        raise NotImplementedError

    def update_checkout(self, *, record_id: str, time_out: time) -> bool:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
