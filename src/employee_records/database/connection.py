from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from urllib.parse import unquote, urlsplit

import mysql.connector
from pymongo import MongoClient

from ..core.constants import DEFAULT_DATABASE_NAME
from ..core.exceptions import ConfigurationError

MONGO_SCHEMES = {"mongodb", "mongodb+srv"}
MYSQL_SCHEMES = {"mysql", "mysql+mysqlconnector"}


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


def parse_mysql_uri(uri: str) -> DBConfig:
    parts = urlsplit(uri)
    database = parts.path.lstrip("/") or DEFAULT_DATABASE_NAME
    return DBConfig(
        host=parts.hostname or "localhost",
        port=int(parts.port or 3306),
        user=unquote(parts.username or "root"),
        password=unquote(parts.password or ""),
        database=database,
    )


class MongoConnection:
    """One MongoClient per process, opened at start-up and closed on shutdown."""

    def __init__(self, uri: str, *, server_selection_timeout_ms: int = 5000):
        self._client = MongoClient(uri, serverSelectionTimeoutMS=server_selection_timeout_ms)
        self._db = self._client.get_default_database(default=DEFAULT_DATABASE_NAME)

    @property
    def database_name(self) -> str:
        return self._db.name

    def collection(self, name: str):
        return self._db[name]

    def close(self) -> None:
        self._client.close()


class MySQLConnection:
    """DB connection factory.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def database_name(self) -> str:
        return self._config.database

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

    def close(self) -> None:
        # Nothing pooled; connections are closed after every operation.
        return None


Connection = Union[MongoConnection, MySQLConnection]


def open_connection(uri: str) -> Connection:
    scheme = urlsplit(uri).scheme.lower()
    if scheme in MONGO_SCHEMES:
        return MongoConnection(uri)
    if scheme in MYSQL_SCHEMES:
        return MySQLConnection(parse_mysql_uri(uri))
    raise ConfigurationError(f"Unsupported database URI scheme: {scheme or '(none)'}")
