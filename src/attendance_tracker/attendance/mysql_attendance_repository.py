from __future__ import annotations

import uuid
from datetime import date, time
from typing import Optional, Sequence

from ..common.datetime_utils import normalize_time
from ..core.enums import RecordStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, employee_code, date, status, time_in, time_out, inserted_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(r["id"]),
        employee_code=r["employee_code"],
        work_date=r["date"],
        status=RecordStatus(r["status"]),
        time_in=normalize_time(r.get("time_in")),
        time_out=normalize_time(r.get("time_out")),
        inserted_at=r.get("inserted_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_records(
        self,
        *,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        employee_code: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        where = []
        params: list = []
        if date_from:
            where.append("date >= %s")
            params.append(date_from)
        if date_to:
            where.append("date <= %s")
            params.append(date_to)
        if employee_code:
            where.append("employee_code = %s")
            params.append(employee_code)

        sql = f"SELECT {_COLUMNS} FROM attendance"
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY date DESC, inserted_at DESC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE id=%s", (record_id,))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_code: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_code=%s AND date=%s ORDER BY inserted_at DESC LIMIT 1",
                (employee_code, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(
        self,
        *,
        employee_code: str,
        work_date: date,
        status: RecordStatus,
        time_in: Optional[time] = None,
        time_out: Optional[time] = None,
    ) -> str:
        record_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(id, employee_code, date, status, time_in, time_out)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (record_id, employee_code, work_date, status.value, time_in, time_out),
            )
        return record_id

    def update_checkout(self, *, record_id: str, time_out: time) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE attendance SET time_out=%s WHERE id=%s AND time_out IS NULL", (time_out, record_id))
            return cur.rowcount > 0

    def delete_by_id(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE id=%s", (record_id,))
            return cur.rowcount > 0
