from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from employee_records.core.exceptions import ConfigurationError
from employee_records.database.bootstrap import init_schema
from employee_records.database.connection import open_connection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    database_uri = getattr(settings, "DATABASE_URI", None)
    if not database_uri:
        raise ConfigurationError("DATABASE_URI (or MONGODB_URI) must be set")

    conn = open_connection(database_uri)
    try:
        created = init_schema(conn)
    finally:
        conn.close()

    print(f"OK: schema ready -> {conn.database_name} ({', '.join(created)})")


if __name__ == "__main__":
    main()
