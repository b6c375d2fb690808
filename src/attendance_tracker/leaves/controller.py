from __future__ import annotations

import logging

from flask import Flask

from ..auth.guards import current_session, login_required
from ..common.responses import fail, ok
from ..container import Container
from .service import leave_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", endpoint="leaves")
    @login_required
    def leaves():
        ctx = current_session()
        try:
            groups = container.leave_service.history(ctx.subject_id)
        except Exception:
            logger.exception("Leave history failed for %s", ctx.subject_id)
            return fail("Failed to load leave history", 500)

        return ok(
            groups=[{"month": g.month, "leaves": [leave_to_dict(leave) for leave in g.leaves]} for g in groups],
        )
