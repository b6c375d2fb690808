from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import load_settings

from attendance_tracker.database.bootstrap import DEMO_ADMIN, DEMO_EMPLOYEES, ensure_demo_data


def main() -> None:
    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_data(db_config)

    codes = ", ".join(code for code, *_ in DEMO_EMPLOYEES)
    print(f"OK: Seeded employees {codes} and admin '{DEMO_ADMIN[0]}' -> {db_config.get('database')}")


if __name__ == "__main__":
    main()
