from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, request

from ..auth.guards import admin_required, current_session, login_required
from ..common.responses import domain_error, fail, ok
from ..common.validators import optional_date
from ..container import Container
from ..core.exceptions import DomainError
from .service import RecordFilter, entry_to_row, record_to_row

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/today", endpoint="attendance_today")
    @login_required
    def attendance_today():
        ctx = current_session()
        entry = container.attendance_service.today_status(ctx.subject_id)
        return ok(today=entry_to_row(entry) if entry else None)

    @app.route("/api/attendance/history", endpoint="attendance_history")
    @login_required
    def attendance_history():
        ctx = current_session()
        history = container.attendance_service.monthly_history(ctx.subject_id)
        return ok(summary=asdict(history.summary), records=history.rows)

    @app.route("/api/attendance/records", endpoint="attendance_records")
    @login_required
    def attendance_records():
        ctx = current_session()
        try:
            records = container.attendance_service.records_for(ctx.subject_id)
        except DomainError as e:
            return domain_error(e)
        return ok(records=[record_to_row(r, ctx.name) for r in records])

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        ctx = current_session()
        try:
            record = container.attendance_service.check_in(ctx.subject_id)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Check-in failed for %s", ctx.subject_id)
            return fail("System error while checking in", 500)
        return ok(201, message="Checked in", record=record_to_row(record, ctx.name))

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        ctx = current_session()
        try:
            record = container.attendance_service.check_out(ctx.subject_id)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Check-out failed for %s", ctx.subject_id)
            return fail("System error while checking out", 500)
        return ok(message="Checked out", record=record_to_row(record, ctx.name))

    @app.route("/admin/api/attendance", methods=["GET"], endpoint="admin_attendance")
    @admin_required
    def admin_attendance():
        args = request.args
        try:
            filt = RecordFilter(
                mode=args.get("mode", "all"),
                day=optional_date(args.get("date"), "date"),
                date_from=optional_date(args.get("from"), "from"),
                date_to=optional_date(args.get("to"), "to"),
                search=args.get("search", ""),
                status=args.get("status", "all"),
            )
            rows = container.attendance_service.list_records(filt)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Loading attendance records failed")
            return fail("Failed to load attendance records", 500)
        return ok(records=rows)

    @app.route("/admin/api/attendance", methods=["POST"], endpoint="admin_add_attendance")
    @admin_required
    def admin_add_attendance():
        data = request.get_json(silent=True) or {}
        try:
            row = container.attendance_service.add_record(
                employee_id=data.get("employee_id", ""),
                work_date=optional_date(data.get("date"), "date"),
                status=data.get("status", ""),
                check_in=data.get("check_in", ""),
                check_out=data.get("check_out", ""),
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Adding attendance record failed")
            return fail("Failed to add attendance record", 500)
        return ok(201, message="Attendance record added successfully", record=row)

    @app.route("/admin/api/attendance/<record_id>", methods=["DELETE"], endpoint="admin_delete_attendance")
    @admin_required
    def admin_delete_attendance(record_id: str):
        try:
            container.attendance_service.delete_record(record_id)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Deleting attendance record %s failed", record_id)
            return fail("Failed to delete attendance record", 500)
        return ok(message="Attendance record deleted")
