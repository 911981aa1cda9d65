from __future__ import annotations

from typing import Any, Dict, Optional

import mysql.connector

from ..core.exceptions import InvalidIdError, ValidationError
from ..database.connection import MySQLConnection
from ..database.mysql_base import db_cursor, fetchone, parse_row_id
from .model import UserAccount
from .repository import UserRepository


def _to_account(row: Dict[str, Any]) -> UserAccount:
    return UserAccount(
        account_id=str(row["account_id"]),
        username=row["username"],
        password_hash=row["password_hash"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: MySQLConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, account_id: str) -> Optional[UserAccount]:
        try:
            row_id = parse_row_id(account_id)
        except InvalidIdError:
            return None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT account_id, username, password_hash FROM users WHERE account_id=%s",
                (row_id,),
            )
            row = fetchone(cur)
            return _to_account(row) if row else None

    def get_by_username(self, username: str) -> Optional[UserAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT account_id, username, password_hash FROM users WHERE username=%s",
                (username,),
            )
            row = fetchone(cur)
            return _to_account(row) if row else None

    def create_account(self, *, username: str, password_hash: str) -> UserAccount:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO users(username, password_hash) VALUES(%s,%s)",
                    (username, password_hash),
                )
                account_id = str(cur.lastrowid)
        except mysql.connector.errors.IntegrityError:
            raise ValidationError("Username already exists")
        return UserAccount(account_id=account_id, username=username, password_hash=password_hash)
