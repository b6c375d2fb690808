from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, ensure_demo_data, list_tables
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    store_backend = getattr(settings, "STORE_BACKEND", "mysql")
    db_config = getattr(settings, "DB_CONFIG", {})
    logger.info("Starting with settings=%s store=%s", settings.__name__, store_backend)

    if container is None:
        if store_backend == "mysql":
            if bool(getattr(settings, "AUTO_INIT_DB", False)):
                apply_schema(db_config, schema_path=SCHEMA_PATH)
                logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
            if bool(getattr(settings, "AUTO_SEED_DB", False)):
                ensure_demo_data(db_config)

        container = build_container(
            store_backend=store_backend,
            db_config=db_config,
            supabase_url=getattr(settings, "SUPABASE_URL", ""),
            supabase_key=getattr(settings, "SUPABASE_KEY", ""),
        )

    register_auth(app, container)
    register_dashboard(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_employees(app, container)

    return app
