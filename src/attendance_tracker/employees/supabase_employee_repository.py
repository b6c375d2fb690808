from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import format_iso_date, normalize_date
from ..core.enums import EmployeeStatus
from ..database.supabase_client import execute
from .model import Employee
from .repository import EmployeeRepository

TABLE = "employees"


def _to_employee(r: dict) -> Employee:
    return Employee(
        id=r["id"],
        name=r["name"],
        department=r.get("department") or "",
        position=r.get("position") or "",
        email=r.get("email"),
        phone=r.get("phone"),
        profile_image=r.get("profile_image") or "",
        join_date=normalize_date(r["join_date"]),
        status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
    )


class SupabaseEmployeeRepository(EmployeeRepository):
    def __init__(self, client):
        self._client = client

    def list_all(self) -> Sequence[Employee]:
        rows = execute(self._client.table(TABLE).select("*").order("name"))
        return [_to_employee(r) for r in rows]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        rows = execute(self._client.table(TABLE).select("*").eq("id", employee_id))
        return _to_employee(rows[0]) if rows else None

    def count(self) -> int:
        return len(execute(self._client.table(TABLE).select("id")))

    def create(self, employee: Employee) -> None:
        execute(
            self._client.table(TABLE).insert(
                {
                    "id": employee.id,
                    "name": employee.name,
                    "department": employee.department,
                    "position": employee.position,
                    "email": employee.email,
                    "phone": employee.phone,
                    "profile_image": employee.profile_image,
                    "join_date": format_iso_date(employee.join_date),
                    "status": employee.status.value,
                }
            )
        )

    def update(self, employee: Employee) -> bool:
        rows = execute(
            self._client.table(TABLE)
            .update(
                {
                    "name": employee.name,
                    "department": employee.department,
                    "position": employee.position,
                    "email": employee.email,
                    "phone": employee.phone,
                    "status": employee.status.value,
                }
            )
            .eq("id", employee.id)
        )
        return bool(rows)

    def delete_by_id(self, employee_id: str) -> bool:
        rows = execute(self._client.table(TABLE).delete().eq("id", employee_id))
        return bool(rows)
