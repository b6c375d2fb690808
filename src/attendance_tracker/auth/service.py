from __future__ import annotations

import logging

from werkzeug.security import check_password_hash

from ..admins.repository import AdminRepository
from ..common.validators import is_employee_id
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..employees.repository import EmployeeRepository
from .session import SessionContext

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: sign employees and admins in."""

    def __init__(self, employees: EmployeeRepository, admins: AdminRepository):
        self._employees = employees
        self._admins = admins

    def login_employee(self, employee_id: str) -> SessionContext:
        employee_id = (employee_id or "").strip()
        if not is_employee_id(employee_id):
            raise ValidationError("Employee ID must be in format K followed by 5 digits (e.g., K14050).")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            logger.warning("Login rejected for unknown employee %s", employee_id)
            raise AuthenticationError("Employee ID not found.")

        logger.info("Employee %s signed in", employee_id)
        return SessionContext(subject_id=employee.id, name=employee.name, role=Role.EMPLOYEE)

    def login_admin(self, admin_id: str, password: str) -> SessionContext:
        admin = self._admins.get_by_admin_id((admin_id or "").strip())
        if not admin:
            logger.warning("Admin login rejected for %s", admin_id)
            raise AuthenticationError("Invalid admin ID or password")

        try:
            ok = check_password_hash(admin.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.warning("Admin login rejected for %s", admin_id)
            raise AuthenticationError("Invalid admin ID or password")

        logger.info("Admin %s signed in", admin.admin_id)
        return SessionContext(subject_id=admin.admin_id, name=admin.name or admin.admin_id, role=Role.ADMIN)
