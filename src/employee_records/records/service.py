from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import NotFoundError
from .model import EmployeeFields, EmployeeRecord
from .repository import EmployeeRecordRepository

logger = logging.getLogger(__name__)


class EmployeeRecordService:
    """Use cases over employee records: list, read, create, update, delete."""

    def __init__(self, records: EmployeeRecordRepository):
        self._records = records

    def list_all(self) -> Sequence[EmployeeRecord]:
        return self._records.list_all()

    def get_by_id(self, record_id: str) -> EmployeeRecord:
        record = self._records.get_by_id(record_id)
        if not record:
            raise NotFoundError(f"Employee record {record_id} not found")
        return record

    def create(self, fields: EmployeeFields) -> EmployeeRecord:
        record = self._records.create(fields)
        logger.info("created employee record %s", record.record_id)
        return record

    def update_by_id(self, record_id: str, fields: EmployeeFields) -> EmployeeRecord:
        record = self._records.update_by_id(record_id, fields)
        if not record:
            raise NotFoundError(f"Employee record {record_id} not found")
        logger.info("updated employee record %s (%s)", record_id, ", ".join(fields.provided()) or "no changes")
        return record

    def delete_by_id(self, record_id: str) -> None:
        if not self._records.delete_by_id(record_id):
            raise NotFoundError(f"Employee record {record_id} not found")
        logger.info("deleted employee record %s", record_id)
