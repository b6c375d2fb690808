from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.validators import optional_text, require_employee_id, require_non_empty
from ..core.constants import DEFAULT_PROFILE_IMAGE
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def employee_to_dict(e: Employee) -> dict:
    return {
        "id": e.id,
        "name": e.name,
        "department": e.department,
        "position": e.position,
        "email": e.email,
        "phone": e.phone,
        "profile_image": e.profile_image,
        "join_date": e.join_date.strftime("%Y-%m-%d"),
        "status": e.status.value,
    }


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def search(self, query: str) -> list[Employee]:
        employees = list(self._employees.list_all())
        q = (query or "").strip().lower()
        if not q:
            return employees
        return [
            e
            for e in employees
            if q in e.name.lower() or q in e.id.lower() or q in e.department.lower() or q in e.position.lower()
        ]

    def create_employee(
        self,
        *,
        employee_id: str,
        name: str,
        department: str,
        position: str,
        email: str = "",
        phone: str = "",
        join_date: Optional[date] = None,
    ) -> Employee:
        if not all((employee_id or "").strip() and (v or "").strip() for v in (name, department, position)):
            raise ValidationError("Please fill all required fields")
        employee_id = require_employee_id(employee_id)

        if self._employees.get_by_id(employee_id):
            raise ValidationError(f"Employee {employee_id} already exists")

        employee = Employee(
            id=employee_id,
            name=name.strip(),
            department=department.strip(),
            position=position.strip(),
            email=optional_text(email),
            phone=optional_text(phone),
            profile_image=DEFAULT_PROFILE_IMAGE,
            join_date=join_date or date.today(),
            status=EmployeeStatus.ACTIVE,
        )
        self._employees.create(employee)
        logger.info("Employee %s created", employee_id)
        return employee

    def update_employee(
        self,
        employee_id: str,
        *,
        name: str,
        department: str,
        position: str,
        email: str = "",
        phone: str = "",
        status: str = EmployeeStatus.ACTIVE.value,
    ) -> Employee:
        current = self._employees.get_by_id(employee_id)
        if not current:
            raise NotFoundError(f"Employee {employee_id} not found")

        try:
            new_status = EmployeeStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown employee status: {status}")

        updated = replace(
            current,
            name=require_non_empty(name, "Name"),
            department=require_non_empty(department, "Department"),
            position=require_non_empty(position, "Position"),
            email=optional_text(email),
            phone=optional_text(phone),
            status=new_status,
        )
        if not self._employees.update(updated):
            raise ValidationError("Failed to update employee")
        logger.info("Employee %s updated", employee_id)
        return updated

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        if not self._employees.delete_by_id(employee_id):
            raise ValidationError("Failed to delete employee")
        logger.info("Employee %s deleted", employee_id)
