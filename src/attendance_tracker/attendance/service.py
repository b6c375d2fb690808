from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import display_time, format_iso_date, parse_hhmm
from ..core.enums import AttendanceStatus, RecordStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .factory import AttendanceStrategyFactory
from .generator import AttendanceRecordGenerator
from .model import AttendanceEntry, AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository
from .summary import AttendanceSummaryCalculator

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.WEEKEND: "Weekend",
    AttendanceStatus.HOLIDAY: "Holiday",
}

TIMED_STATUSES = frozenset({RecordStatus.PRESENT, RecordStatus.LATE})


@dataclass(frozen=True)
class MonthlyHistory:
    employee_id: str
    entries: list[AttendanceEntry]
    summary: AttendanceSummary
    rows: list[dict] = field(default_factory=list)


@dataclass(frozen=True)
class RecordFilter:
    """Admin attendance list filter.

    mode "daily" keeps `day` only, "range" keeps `date_from`..`date_to` inclusive,
    "all" applies no date condition. status "all" disables the status condition.
    """

    mode: str = "all"
    day: Optional[date] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    search: str = ""
    status: str = "all"


def entry_to_row(entry: AttendanceEntry) -> dict:
    return {
        "date": entry.date,
        "status": entry.status.value,
        "label": STATUS_LABELS[entry.status],
        "check_in": display_time(entry.check_in),
        "check_out": display_time(entry.check_out),
        "is_open": entry.is_open,
    }


def record_to_row(record: AttendanceRecord, employee_name: Optional[str]) -> dict:
    return {
        "id": record.record_id,
        "employee_id": record.employee_code,
        "employee_name": employee_name,
        "date": format_iso_date(record.work_date),
        "status": record.status.value,
        "check_in": record.time_in.strftime("%H:%M") if record.time_in else None,
        "check_out": record.time_out.strftime("%H:%M") if record.time_out else None,
    }


def filter_records(rows: Iterable[dict], filt: RecordFilter) -> list[dict]:
    out = list(rows)

    if filt.mode == "daily" and filt.day:
        day = format_iso_date(filt.day)
        out = [r for r in out if r["date"] == day]
    elif filt.mode == "range" and filt.date_from and filt.date_to:
        lo, hi = format_iso_date(filt.date_from), format_iso_date(filt.date_to)
        out = [r for r in out if lo <= r["date"] <= hi]

    q = (filt.search or "").strip().lower()
    if q:
        out = [r for r in out if q in (r.get("employee_name") or "").lower() or q in r["employee_id"].lower()]

    if filt.status and filt.status != "all":
        out = [r for r in out if r["status"] == filt.status]

    return out


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        generator: Optional[AttendanceRecordGenerator] = None,
        summary_calculator: Optional[AttendanceSummaryCalculator] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._generator = generator or AttendanceRecordGenerator(strategy_factory=self._factory)
        self._calculator = summary_calculator or AttendanceSummaryCalculator()

    # Employee views (generated data)

    def monthly_history(self, employee_id: str, *, today: Optional[date] = None) -> MonthlyHistory:
        entries = self._generator.generate_month(today or date.today())
        return MonthlyHistory(
            employee_id=employee_id,
            entries=entries,
            summary=self._calculator.summarize(entries),
            rows=[entry_to_row(e) for e in entries],
        )

    def today_status(self, employee_id: str, *, today: Optional[date] = None) -> Optional[AttendanceEntry]:
        return self._generator.today_entry(today or date.today())

    # Stored check-in / check-out

    def check_in(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or datetime.now()
        today = now.date()

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")

        existing = self._attendance.get_for_employee_and_date(employee_id, today)
        if existing and existing.time_in is None:
            raise ValidationError(f"Today's attendance is already recorded as {existing.status.value}")
        if existing:
            raise ValidationError("You have already checked in today")

        strategy = self._factory.for_checkin(now=now)
        status = RecordStatus(strategy.status.value)
        time_in = now.time().replace(microsecond=0)
        record_id = self._attendance.create(employee_code=employee_id, work_date=today, status=status, time_in=time_in)
        logger.info("Employee %s checked in at %s (%s)", employee_id, time_in, status.value)
        return AttendanceRecord(
            record_id=record_id, employee_code=employee_id, work_date=today, status=status, time_in=time_in
        )

    def check_out(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or datetime.now()
        today = now.date()

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record or record.time_in is None:
            raise ValidationError("You have not checked in today")
        if record.time_out is not None:
            raise ValidationError("You have already checked out today")

        time_out = now.time().replace(microsecond=0)
        if not self._attendance.update_checkout(record_id=record.record_id, time_out=time_out):
            raise ValidationError("Failed to record check-out")
        logger.info("Employee %s checked out at %s", employee_id, time_out)
        return AttendanceRecord(
            record_id=record.record_id,
            employee_code=record.employee_code,
            work_date=record.work_date,
            status=record.status,
            time_in=record.time_in,
            time_out=time_out,
            inserted_at=record.inserted_at,
        )

    # Admin management (stored data)

    def list_records(self, filt: RecordFilter) -> list[dict]:
        date_from = date_to = None
        if filt.mode == "daily" and filt.day:
            date_from = date_to = filt.day
        elif filt.mode == "range" and filt.date_from and filt.date_to:
            date_from, date_to = filt.date_from, filt.date_to

        records = self._attendance.list_records(date_from=date_from, date_to=date_to)
        names = {e.id: e.name for e in self._employees.list_all()}
        rows = [record_to_row(r, names.get(r.employee_code)) for r in records]
        return filter_records(rows, filt)

    def add_record(
        self,
        *,
        employee_id: str,
        work_date: Optional[date],
        status: str,
        check_in: str = "",
        check_out: str = "",
    ) -> dict:
        if not (employee_id or "").strip() or not work_date or not (status or "").strip():
            raise ValidationError("Please fill all required fields")

        try:
            record_status = RecordStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {status}")

        employee = self._employees.get_by_id(employee_id.strip())
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        if self._attendance.get_for_employee_and_date(employee.id, work_date):
            raise ValidationError(f"Attendance for {employee.id} on {format_iso_date(work_date)} already exists")

        time_in: Optional[time] = None
        time_out: Optional[time] = None
        if record_status in TIMED_STATUSES:
            time_in = self._parse_time(check_in)
            time_out = self._parse_time(check_out)
            if time_in and time_out and time_out < time_in:
                raise ValidationError("Check-out cannot be earlier than check-in")

        record_id = self._attendance.create(
            employee_code=employee.id,
            work_date=work_date,
            status=record_status,
            time_in=time_in,
            time_out=time_out,
        )
        logger.info("Attendance record %s added for %s on %s", record_id, employee.id, work_date)
        record = AttendanceRecord(
            record_id=record_id,
            employee_code=employee.id,
            work_date=work_date,
            status=record_status,
            time_in=time_in,
            time_out=time_out,
        )
        return record_to_row(record, employee.name)

    def delete_record(self, record_id: str) -> None:
        if not self._attendance.get_by_id(record_id):
            raise NotFoundError("Attendance record not found")
        if not self._attendance.delete_by_id(record_id):
            raise ValidationError("Failed to delete attendance record")
        logger.info("Attendance record %s deleted", record_id)

    def records_for(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_records(employee_code=employee_id)

    @staticmethod
    def _parse_time(value: str) -> Optional[time]:
        v = (value or "").strip()
        if not v:
            return None
        try:
            return parse_hhmm(v)
        except ValueError:
            raise ValidationError("Invalid time (HH:MM)")
