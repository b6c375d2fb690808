from __future__ import annotations

from datetime import date, time
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError

from attendance_tracker.admins.supabase_admin_repository import SupabaseAdminRepository
from attendance_tracker.attendance.supabase_attendance_repository import SupabaseAttendanceRepository
from attendance_tracker.core.enums import EmployeeStatus, RecordStatus
from attendance_tracker.core.exceptions import StoreError
from attendance_tracker.database.supabase_client import SupabaseConfig, get_supabase_client
from attendance_tracker.employees.supabase_employee_repository import SupabaseEmployeeRepository


class FakeQuery:
    """Records the builder calls and returns canned rows on execute()."""

    def __init__(self, table: str, rows, error: APIError | None = None):
        self.table = table
        self.calls: list[tuple] = []
        self._rows = rows
        self._error = error

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self

        return method

    def execute(self):
        if self._error is not None:
            raise self._error
        return SimpleNamespace(data=self._rows)


class FakeClient:
    def __init__(self, rows=(), error: APIError | None = None):
        self._rows = list(rows)
        self._error = error
        self.queries: list[FakeQuery] = []

    def table(self, name: str) -> FakeQuery:
        query = FakeQuery(name, self._rows, self._error)
        self.queries.append(query)
        return query


ATTENDANCE_ROW = {
    "id": "5f2c",
    "employee_code": "K14050",
    "date": "2026-10-05",
    "status": "late",
    "time_in": "09:20:00",
    "time_out": None,
    "inserted_at": None,
}


def test_attendance_list_records_builds_filters():
    client = FakeClient([ATTENDANCE_ROW])
    repo = SupabaseAttendanceRepository(client)

    (record,) = repo.list_records(date_from=date(2026, 10, 1), date_to=date(2026, 10, 31), employee_code="K14050")

    assert record.status == RecordStatus.LATE
    assert record.work_date == date(2026, 10, 5)
    assert record.time_in == time(9, 20)
    assert record.time_out is None

    query = client.queries[0]
    assert query.table == "attendance"
    assert ("gte", ("date", "2026-10-01"), {}) in query.calls
    assert ("lte", ("date", "2026-10-31"), {}) in query.calls
    assert ("eq", ("employee_code", "K14050"), {}) in query.calls
    assert query.calls[-1] == ("order", ("date",), {"desc": True})


def test_attendance_create_returns_new_id():
    client = FakeClient([ATTENDANCE_ROW])
    repo = SupabaseAttendanceRepository(client)

    record_id = repo.create(
        employee_code="K14050", work_date=date(2026, 10, 5), status=RecordStatus.LATE, time_in=time(9, 20)
    )

    assert record_id == "5f2c"
    name, args, _ = client.queries[0].calls[0]
    assert name == "insert"
    assert args[0]["time_in"] == "09:20:00"
    assert args[0]["time_out"] is None
    assert args[0]["status"] == "late"


def test_attendance_create_without_row_raises():
    repo = SupabaseAttendanceRepository(FakeClient([]))

    with pytest.raises(StoreError):
        repo.create(employee_code="K14050", work_date=date(2026, 10, 5), status=RecordStatus.ABSENT)


def test_attendance_checkout_only_updates_open_rows():
    client = FakeClient([])
    repo = SupabaseAttendanceRepository(client)

    assert repo.update_checkout(record_id="5f2c", time_out=time(17, 0)) is False
    assert ("is_", ("time_out", "null"), {}) in client.queries[0].calls


def test_attendance_day_lookup_takes_the_latest_row():
    client = FakeClient([ATTENDANCE_ROW])
    repo = SupabaseAttendanceRepository(client)

    record = repo.get_for_employee_and_date("K14050", date(2026, 10, 5))

    assert record.record_id == "5f2c"
    assert client.queries[0].calls[-2:] == [
        ("order", ("inserted_at",), {"desc": True}),
        ("limit", (1,), {}),
    ]


def test_api_error_becomes_store_error():
    error = APIError({"message": "relation does not exist", "code": "42P01", "hint": None, "details": None})
    repo = SupabaseAttendanceRepository(FakeClient(error=error))

    with pytest.raises(StoreError, match="relation does not exist"):
        repo.get_by_id("5f2c")


def test_employee_rows_are_mapped():
    row = {
        "id": "K14050",
        "name": "John Doe",
        "department": "Engineering",
        "position": "Software Developer",
        "email": None,
        "phone": None,
        "profile_image": "/placeholder.svg",
        "join_date": "2023-01-15",
        "status": "inactive",
    }
    client = FakeClient([row, dict(row, id="K14051")])
    repo = SupabaseEmployeeRepository(client)

    employee = repo.get_by_id("K14050")
    assert employee.join_date == date(2023, 1, 15)
    assert employee.status == EmployeeStatus.INACTIVE
    assert repo.count() == 2


def test_admin_lookup():
    client = FakeClient([{"id": 1, "admin_id": "admin", "name": "Administrator", "password_hash": "h"}])

    admin = SupabaseAdminRepository(client).get_by_admin_id("admin")

    assert admin.id == "1"
    assert admin.password_hash == "h"
    assert client.queries[0].table == "admins"


def test_supabase_client_requires_credentials():
    with pytest.raises(StoreError):
        get_supabase_client(SupabaseConfig(url="", key=""))
