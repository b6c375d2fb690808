from __future__ import annotations

import logging
from datetime import date

from flask import Flask, request

from ..attendance.service import entry_to_row
from ..auth.guards import admin_required, current_session, login_required
from ..common.responses import domain_error, fail, ok
from ..common.validators import optional_date
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _stats_range() -> tuple[date, date]:
        today = date.today()
        date_from = optional_date(request.args.get("from"), "from") or today.replace(day=1)
        date_to = optional_date(request.args.get("to"), "to") or today
        return date_from, date_to

    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        ctx = current_session()
        try:
            date_from, date_to = _stats_range()
            entry = container.attendance_service.today_status(ctx.subject_id)
            stats = container.dashboard_service.quick_stats(date_from, date_to)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Dashboard failed for %s", ctx.subject_id)
            return fail("Failed to load dashboard data", 500)

        return ok(
            name=ctx.name,
            today=entry_to_row(entry) if entry else None,
            stats=stats.to_dict(),
            range={"from": date_from.isoformat(), "to": date_to.isoformat()},
        )

    @app.route("/api/dashboard/stats", endpoint="dashboard_stats")
    @login_required
    def dashboard_stats():
        try:
            date_from, date_to = _stats_range()
            stats = container.dashboard_service.quick_stats(date_from, date_to)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Dashboard stats failed")
            return fail("Failed to load dashboard data", 500)
        return ok(stats=stats.to_dict(), range={"from": date_from.isoformat(), "to": date_to.isoformat()})

    @app.route("/admin/api/dashboard", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        try:
            stats = container.dashboard_service.admin_stats()
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Admin dashboard failed")
            return fail("Failed to load dashboard data", 500)
        return ok(stats=stats.to_dict())
