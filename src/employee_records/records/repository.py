from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeFields, EmployeeRecord


class EmployeeRecordRepository(Protocol):
    """Record Store interface over the employee collection.

    Implementations raise ``InvalidIdError`` for ids malformed for their id
    format and ``StoreUnavailableError`` when the backend cannot be reached.
    """

    def list_all(self) -> Sequence[EmployeeRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[EmployeeRecord]:
        raise NotImplementedError

    def create(self, fields: EmployeeFields) -> EmployeeRecord:
        raise NotImplementedError

    def update_by_id(self, record_id: str, fields: EmployeeFields) -> Optional[EmployeeRecord]:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
