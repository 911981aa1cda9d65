"""Create a login account out of band (there is no self-registration page).

Usage: python scripts/create_user.py USERNAME [--password PASSWORD]
"""
from __future__ import annotations

import argparse
import getpass
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from employee_records.container import build_container
from employee_records.core.exceptions import ConfigurationError, ValidationError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an employee-records login account.")
    parser.add_argument("username")
    parser.add_argument("--password", help="prompted for when omitted")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    database_uri = getattr(settings, "DATABASE_URI", None)
    if not database_uri:
        raise ConfigurationError("DATABASE_URI (or MONGODB_URI) must be set")

    password = args.password or getpass.getpass("Password: ")

    container = build_container(database_uri=database_uri, session_days=int(getattr(settings, "SESSION_DAYS", 1)))
    try:
        account = container.auth_service.create_account(username=args.username, password=password)
    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        container.close()

    print(f"OK: created account {account.username} (id={account.account_id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
