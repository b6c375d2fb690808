from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..common.datetime_utils import format_iso_date, normalize_date, normalize_time
from ..core.enums import RecordStatus
from ..core.exceptions import StoreError
from ..database.supabase_client import execute
from .model import AttendanceRecord
from .repository import AttendanceRepository

TABLE = "attendance"


def _time_value(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M:%S") if value else None


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(r["id"]),
        employee_code=r["employee_code"],
        work_date=normalize_date(r["date"]),
        status=RecordStatus(r["status"]),
        time_in=normalize_time(r.get("time_in")),
        time_out=normalize_time(r.get("time_out")),
        inserted_at=r.get("inserted_at"),
    )


class SupabaseAttendanceRepository(AttendanceRepository):
    """`attendance` rows through the Supabase (PostgREST) client."""

    def __init__(self, client):
        self._client = client

    def list_records(
        self,
        *,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        employee_code: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        query = self._client.table(TABLE).select("*")
        if date_from:
            query = query.gte("date", format_iso_date(date_from))
        if date_to:
            query = query.lte("date", format_iso_date(date_to))
        if employee_code:
            query = query.eq("employee_code", employee_code)
        rows = execute(query.order("date", desc=True))
        return [_to_record(r) for r in rows]

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        rows = execute(self._client.table(TABLE).select("*").eq("id", record_id))
        return _to_record(rows[0]) if rows else None

    def get_for_employee_and_date(self, employee_code: str, work_date: date) -> Optional[AttendanceRecord]:
        rows = execute(
            self._client.table(TABLE)
            .select("*")
            .eq("employee_code", employee_code)
            .eq("date", format_iso_date(work_date))
            .order("inserted_at", desc=True)
            .limit(1)
        )
        return _to_record(rows[0]) if rows else None

    def create(
        self,
        *,
        employee_code: str,
        work_date: date,
        status: RecordStatus,
        time_in: Optional[time] = None,
        time_out: Optional[time] = None,
    ) -> str:
        rows = execute(
            self._client.table(TABLE).insert(
                {
                    "employee_code": employee_code,
                    "date": format_iso_date(work_date),
                    "status": status.value,
                    "time_in": _time_value(time_in),
                    "time_out": _time_value(time_out),
                }
            )
        )
        if not rows:
            raise StoreError("Insert into attendance returned no row")
        return str(rows[0]["id"])

    def update_checkout(self, *, record_id: str, time_out: time) -> bool:
        rows = execute(
            self._client.table(TABLE).update({"time_out": _time_value(time_out)}).eq("id", record_id).is_("time_out", "null")
        )
        return bool(rows)

    def delete_by_id(self, record_id: str) -> bool:
        rows = execute(self._client.table(TABLE).delete().eq("id", record_id))
        return bool(rows)
