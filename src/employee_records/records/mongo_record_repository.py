from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from pymongo import ASCENDING, ReturnDocument

from ..core.constants import EMPLOYEE_COLLECTION
from ..database.connection import MongoConnection
from ..database.mongo_base import mongo_errors, parse_object_id, strip_id
from .model import EmployeeFields, EmployeeRecord
from .repository import EmployeeRecordRepository


def _to_record(doc: Mapping[str, Any]) -> EmployeeRecord:
    record_id, rest = strip_id(doc)
    return EmployeeRecord.from_fields(record_id, EmployeeFields.from_document(rest))


class MongoEmployeeRecordRepository(EmployeeRecordRepository):
    def __init__(self, conn: MongoConnection):
        self._collection = conn.collection(EMPLOYEE_COLLECTION)

    def list_all(self) -> Sequence[EmployeeRecord]:
        # ObjectIds grow with insertion time, so _id order is insertion order.
        with mongo_errors():
            docs = list(self._collection.find().sort("_id", ASCENDING))
        return [_to_record(d) for d in docs]

    def get_by_id(self, record_id: str) -> Optional[EmployeeRecord]:
        oid = parse_object_id(record_id)
        with mongo_errors():
            doc = self._collection.find_one({"_id": oid})
        return _to_record(doc) if doc else None

    def create(self, fields: EmployeeFields) -> EmployeeRecord:
        doc = fields.provided()
        with mongo_errors():
            result = self._collection.insert_one(doc)
        return EmployeeRecord.from_fields(str(result.inserted_id), fields)

    def update_by_id(self, record_id: str, fields: EmployeeFields) -> Optional[EmployeeRecord]:
        oid = parse_object_id(record_id)
        changes = fields.provided()
        with mongo_errors():
            if not changes:
                doc = self._collection.find_one({"_id": oid})
            else:
                doc = self._collection.find_one_and_update(
                    {"_id": oid},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
        return _to_record(doc) if doc else None

    def delete_by_id(self, record_id: str) -> bool:
        oid = parse_object_id(record_id)
        with mongo_errors():
            result = self._collection.delete_one({"_id": oid})
        return result.deleted_count > 0
