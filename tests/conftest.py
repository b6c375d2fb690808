from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date, time
from typing import Optional

import pytest

from attendance_tracker.admins.model import Admin
from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.core.enums import RecordStatus
from attendance_tracker.employees.model import Employee


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id: dict[str, Employee] = {e.id: e for e in employees}

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda e: e.name)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def count(self) -> int:
        return len(self._by_id)

    def create(self, employee: Employee) -> None:
        self._by_id[employee.id] = employee

    def update(self, employee: Employee) -> bool:
        if employee.id not in self._by_id:
            return False
        self._by_id[employee.id] = employee
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None


class InMemoryAttendance:
    def __init__(self):
        self._by_id: dict[str, AttendanceRecord] = {}

    def list_records(self, *, date_from=None, date_to=None, employee_code=None):
        items = list(self._by_id.values())
        if date_from:
            items = [r for r in items if r.work_date >= date_from]
        if date_to:
            items = [r for r in items if r.work_date <= date_to]
        if employee_code:
            items = [r for r in items if r.employee_code == employee_code]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._by_id.get(record_id)

    def get_for_employee_and_date(self, employee_code: str, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._by_id.values():
            if r.employee_code == employee_code and r.work_date == work_date:
                return r
        return None

    def create(self, *, employee_code: str, work_date: date, status: RecordStatus, time_in=None, time_out=None) -> str:
        record_id = str(uuid.uuid4())
        self._by_id[record_id] = AttendanceRecord(
            record_id=record_id,
            employee_code=employee_code,
            work_date=work_date,
            status=status,
            time_in=time_in,
            time_out=time_out,
        )
        return record_id

    def update_checkout(self, *, record_id: str, time_out: time) -> bool:
        current = self._by_id.get(record_id)
        if current is None or current.time_out is not None:
            return False
        self._by_id[record_id] = replace(current, time_out=time_out)
        return True

    def delete_by_id(self, record_id: str) -> bool:
        return self._by_id.pop(record_id, None) is not None


class InMemoryAdmins:
    def __init__(self, admins=()):
        self._by_admin_id = {a.admin_id: a for a in admins}

    def get_by_admin_id(self, admin_id: str) -> Optional[Admin]:
        return self._by_admin_id.get(admin_id)


class ScriptedRandom:
    """Stands in for random.Random and hands out a fixed sequence of draws."""

    def __init__(self, draws):
        self._draws = list(draws)

    def random(self) -> float:
        if not self._draws:
            raise AssertionError("ran out of scripted draws")
        return self._draws.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._draws)


def make_employee(employee_id: str = "K14050", name: str = "John Doe", **overrides) -> Employee:
    fields = dict(
        id=employee_id,
        name=name,
        department="Engineering",
        position="Software Developer",
        profile_image="/placeholder.svg",
        join_date=date(2023, 1, 15),
        email="john.doe@example.com",
    )
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def employees_repo():
    return InMemoryEmployees(
        [
            make_employee(),
            make_employee("K14051", "Jane Smith", department="Marketing", position="Marketing Specialist"),
        ]
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def admins_repo():
    from werkzeug.security import generate_password_hash

    return InMemoryAdmins(
        [
            Admin(id="a-1", admin_id="admin", name="Administrator", password_hash=generate_password_hash("admin123")),
            Admin(id="a-2", admin_id="broken", name="Broken", password_hash="not-a-hash"),
        ]
    )


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def employee_factory():
    return make_employee
