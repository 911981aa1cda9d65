from __future__ import annotations

import uuid
from typing import Dict, Optional, Sequence

import pytest

from employee_records import create_app
from employee_records.container import wire
from employee_records.core.exceptions import InvalidIdError, StoreUnavailableError, ValidationError
from employee_records.records.model import EmployeeFields, EmployeeRecord
from employee_records.users.model import UserAccount


def _check_id(record_id: str) -> None:
    try:
        if uuid.UUID(hex=record_id).hex != record_id:
            raise ValueError(record_id)
    except (ValueError, TypeError):
        raise InvalidIdError(f"Invalid record id: {record_id}")


class InMemoryRecords:
    """EmployeeRecordRepository keeping records in insertion order; ids are uuid hex strings."""

    def __init__(self):
        self._records: Dict[str, EmployeeRecord] = {}
        self.unavailable = False

    def _ensure_up(self) -> None:
        if self.unavailable:
            raise StoreUnavailableError("The employee database is unavailable")

    def list_all(self) -> Sequence[EmployeeRecord]:
        self._ensure_up()
        return list(self._records.values())

    def get_by_id(self, record_id: str) -> Optional[EmployeeRecord]:
        _check_id(record_id)
        self._ensure_up()
        return self._records.get(record_id)

    def create(self, fields: EmployeeFields) -> EmployeeRecord:
        self._ensure_up()
        record = EmployeeRecord.from_fields(uuid.uuid4().hex, fields)
        self._records[record.record_id] = record
        return record

    def update_by_id(self, record_id: str, fields: EmployeeFields) -> Optional[EmployeeRecord]:
        _check_id(record_id)
        self._ensure_up()
        current = self._records.get(record_id)
        if current is None:
            return None
        merged = {**current.as_fields().provided(), **fields.provided()}
        updated = EmployeeRecord.from_fields(record_id, EmployeeFields(**merged))
        self._records[record_id] = updated
        return updated

    def delete_by_id(self, record_id: str) -> bool:
        _check_id(record_id)
        self._ensure_up()
        return self._records.pop(record_id, None) is not None


class InMemoryUsers:
    def __init__(self):
        self.accounts: Dict[str, UserAccount] = {}
        self._next_id = 1

    def get_by_id(self, account_id: str) -> Optional[UserAccount]:
        return self.accounts.get(account_id)

    def get_by_username(self, username: str) -> Optional[UserAccount]:
        return next((a for a in self.accounts.values() if a.username == username), None)

    def create_account(self, *, username: str, password_hash: str) -> UserAccount:
        if self.get_by_username(username):
            raise ValidationError("Username already exists")
        account = UserAccount(account_id=str(self._next_id), username=username, password_hash=password_hash)
        self._next_id += 1
        self.accounts[account.account_id] = account
        return account


@pytest.fixture
def records_repo() -> InMemoryRecords:
    return InMemoryRecords()


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def container(records_repo, users_repo):
    return wire(records_repo=records_repo, users_repo=users_repo, session_days=1)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def account(container) -> UserAccount:
    return container.auth_service.create_account(username="alice", password="secret123")


@pytest.fixture
def logged_in(client, account):
    resp = client.post("/login", data={"username": "alice", "password": "secret123"})
    assert resp.status_code == 302
    return client
