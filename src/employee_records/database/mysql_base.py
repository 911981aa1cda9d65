from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import InvalidIdError, StoreUnavailableError
from .connection import MySQLConnection


def _open(conn_factory: MySQLConnection):
    try:
        return conn_factory.connect()
    except (mysql.connector.errors.InterfaceError, mysql.connector.errors.OperationalError) as e:
        raise StoreUnavailableError("The employee database is unavailable") from e


@contextmanager
def db_cursor(conn_factory: MySQLConnection, *, dictionary: bool = True):
    conn = _open(conn_factory)
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def parse_row_id(value: str) -> int:
    """Row ids are positive integers; anything else is a malformed id."""
    text = str(value).strip()
    # isdigit alone accepts digits such as "²" that int() rejects
    if not (text.isascii() and text.isdigit()) or int(text) <= 0:
        raise InvalidIdError(f"Invalid record id: {value}")
    return int(text)
