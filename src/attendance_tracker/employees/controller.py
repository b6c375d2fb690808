from __future__ import annotations

import logging

from flask import Flask, request

from ..auth.guards import admin_required
from ..common.responses import domain_error, fail, ok
from ..container import Container
from ..core.exceptions import DomainError
from .service import employee_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/api/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    def admin_employees():
        try:
            employees = container.employee_service.search(request.args.get("q", ""))
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Loading employees failed")
            return fail("Failed to load employees", 500)
        return ok(employees=[employee_to_dict(e) for e in employees])

    @app.route("/admin/api/employees", methods=["POST"], endpoint="admin_add_employee")
    @admin_required
    def admin_add_employee():
        data = request.get_json(silent=True) or {}
        try:
            employee = container.employee_service.create_employee(
                employee_id=data.get("id", ""),
                name=data.get("name", ""),
                department=data.get("department", ""),
                position=data.get("position", ""),
                email=data.get("email", ""),
                phone=data.get("phone", ""),
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Adding employee failed")
            return fail("Failed to add employee", 500)
        return ok(201, message="Employee added successfully", employee=employee_to_dict(employee))

    @app.route("/admin/api/employees/<employee_id>", methods=["PUT"], endpoint="admin_update_employee")
    @admin_required
    def admin_update_employee(employee_id: str):
        data = request.get_json(silent=True) or {}
        try:
            employee = container.employee_service.update_employee(
                employee_id,
                name=data.get("name", ""),
                department=data.get("department", ""),
                position=data.get("position", ""),
                email=data.get("email", ""),
                phone=data.get("phone", ""),
                status=data.get("status", "active"),
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Updating employee %s failed", employee_id)
            return fail("Failed to update employee", 500)
        return ok(message="Employee updated successfully", employee=employee_to_dict(employee))

    @app.route("/admin/api/employees/<employee_id>", methods=["DELETE"], endpoint="admin_delete_employee")
    @admin_required
    def admin_delete_employee(employee_id: str):
        try:
            container.employee_service.delete_employee(employee_id)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Deleting employee %s failed", employee_id)
            return fail("Failed to delete employee", 500)
        return ok(message="Employee deleted successfully")
