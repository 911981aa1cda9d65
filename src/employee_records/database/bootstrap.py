from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import mysql.connector
from pymongo import ASCENDING

from ..core.constants import USER_COLLECTION
from .connection import Connection, MongoConnection, MySQLConnection

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # schema.sql holds DDL only, no ';' inside literals
    for stmt in sql.split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def ensure_database_exists(conn: MySQLConnection) -> None:
    target = conn.config
    server = mysql.connector.connect(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    try:
        cur = server.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        server.commit()
    finally:
        server.close()


def apply_schema(conn: MySQLConnection, *, schema_path: str | Path = SCHEMA_PATH) -> List[str]:
    ensure_database_exists(conn)
    sql = Path(schema_path).read_text(encoding="utf-8")

    db = conn.connect()
    try:
        cur = db.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        db.commit()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        db.close()


def ensure_indexes(conn: MongoConnection) -> List[str]:
    users = conn.collection(USER_COLLECTION)
    users.create_index([("username", ASCENDING)], unique=True, name="uq_users_username")
    return sorted(users.index_information())


def init_schema(conn: Connection) -> List[str]:
    """Create what the stores need: MySQL tables or MongoDB indexes. Idempotent."""
    if isinstance(conn, MySQLConnection):
        created = apply_schema(conn)
    else:
        created = ensure_indexes(conn)
    logger.info("schema ready on %s: %s", conn.database_name, ", ".join(created))
    return created
