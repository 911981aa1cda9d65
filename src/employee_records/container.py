from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .database.connection import Connection, MongoConnection, open_connection
from .records.mongo_record_repository import MongoEmployeeRecordRepository
from .records.mysql_record_repository import MySQLEmployeeRecordRepository
from .records.repository import EmployeeRecordRepository
from .records.service import EmployeeRecordService
from .users.mongo_user_repository import MongoUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .users.sessions import SessionRegistry


@dataclass(frozen=True)
class Container:
    conn: Optional[Connection]

    records_repo: EmployeeRecordRepository
    users_repo: UserRepository
    sessions: SessionRegistry

    record_service: EmployeeRecordService
    auth_service: AuthService

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def wire(
    *,
    records_repo: EmployeeRecordRepository,
    users_repo: UserRepository,
    session_days: int,
    conn: Optional[Connection] = None,
) -> Container:
    sessions = SessionRegistry(timedelta(days=session_days))
    return Container(
        conn=conn,
        records_repo=records_repo,
        users_repo=users_repo,
        sessions=sessions,
        record_service=EmployeeRecordService(records_repo),
        auth_service=AuthService(users_repo, sessions),
    )


def build_container(*, database_uri: str, session_days: int) -> Container:
    conn = open_connection(database_uri)

    if isinstance(conn, MongoConnection):
        records_repo = MongoEmployeeRecordRepository(conn)
        users_repo = MongoUserRepository(conn)
    else:
        records_repo = MySQLEmployeeRecordRepository(conn)
        users_repo = MySQLUserRepository(conn)

    return wire(records_repo=records_repo, users_repo=users_repo, session_days=session_days, conn=conn)
