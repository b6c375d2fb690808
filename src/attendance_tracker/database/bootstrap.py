from __future__ import annotations

import logging
import re
import uuid
from datetime import date
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.constants import DEFAULT_PROFILE_IMAGE
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = (
    ("K14050", "Jane Smith", "Engineering", "Senior Developer"),
    ("K14051", "John Doe", "Marketing", "Marketing Manager"),
)
DEMO_ADMIN = ("admin", "Administrator", "admin123")


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Split on ';' outside single-quoted literals; drop '--' comment lines.
    lines = [line for line in sql.splitlines() if not line.lstrip().startswith("--")]
    buf: list[str] = []
    in_quote = False
    for ch in "\n".join(lines):
        if ch == "'":
            in_quote = not in_quote
        if ch == ";" and not in_quote:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied from %s", schema_path)


def ensure_demo_data(db_config: dict) -> None:
    """Upsert the demo employees and the demo admin account."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor(dictionary=True)

        for code, name, department, position in DEMO_EMPLOYEES:
            cur.execute(
                """
                INSERT INTO employees (id, name, department, position, profile_image, join_date, status)
                VALUES (%s, %s, %s, %s, %s, %s, 'active')
                ON DUPLICATE KEY UPDATE name=VALUES(name), department=VALUES(department), position=VALUES(position)
                """,
                (code, name, department, position, DEFAULT_PROFILE_IMAGE, date.today()),
            )

        admin_id, admin_name, admin_password = DEMO_ADMIN
        cur.execute("SELECT id FROM admins WHERE admin_id=%s", (admin_id,))
        existing = cur.fetchone()
        password_hash = generate_password_hash(admin_password)
        if existing:
            cur.execute("UPDATE admins SET name=%s, password_hash=%s WHERE admin_id=%s", (admin_name, password_hash, admin_id))
        else:
            cur.execute(
                "INSERT INTO admins (id, admin_id, name, password_hash) VALUES (%s, %s, %s, %s)",
                (str(uuid.uuid4()), admin_id, admin_name, password_hash),
            )

        conn.commit()
    finally:
        conn.close()
    logger.info("Demo employees and admin ready")


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
