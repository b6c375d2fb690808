from __future__ import annotations

import logging

from flask import Flask, request, session

from ..common.responses import domain_error, fail, ok
from ..core.exceptions import DomainError
from ..container import Container
from .guards import current_session, login_required
from .session import SessionContext

logger = logging.getLogger(__name__)


def _session_payload(ctx: SessionContext) -> dict:
    return {"id": ctx.subject_id, "name": ctx.name, "role": ctx.role.value}


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        try:
            ctx = container.auth_service.login_employee(data.get("employee_id", ""))
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Employee login failed")
            return fail("System error while signing in", 500)

        session.permanent = True
        ctx.store(session)
        return ok(message=f"Welcome back, {ctx.name}!", user=_session_payload(ctx))

    @app.route("/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True) or request.form
        try:
            ctx = container.auth_service.login_admin(data.get("admin_id", ""), data.get("password", ""))
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Admin login failed")
            return fail("System error while signing in", 500)

        session.permanent = True
        ctx.store(session)
        return ok(message=f"Welcome back, {ctx.name}!", user=_session_payload(ctx))

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        SessionContext.clear(session)
        return ok(message="You have been logged out successfully.")

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return ok(user=_session_payload(current_session()))
