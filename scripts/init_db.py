from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import load_settings

from attendance_tracker.database.bootstrap import apply_schema, list_tables


def main() -> None:
    settings = load_settings()

    # Supabase tables are managed from its dashboard
    if getattr(settings, "STORE_BACKEND", "mysql") != "mysql":
        raise SystemExit(f"{settings.__name__} uses STORE_BACKEND={settings.STORE_BACKEND!r}; nothing to initialise")

    db_config = dict(settings.DB_CONFIG)
    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")

    print(f"OK: {db_config.get('database')} on {db_config.get('host')} has tables: {', '.join(list_tables(db_config))}")


if __name__ == "__main__":
    main()
