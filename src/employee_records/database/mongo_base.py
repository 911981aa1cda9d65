from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict

from bson import ObjectId
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from ..core.exceptions import InvalidIdError, StoreUnavailableError


@contextmanager
def mongo_errors():
    try:
        yield
    except (ConnectionFailure, ServerSelectionTimeoutError) as e:
        raise StoreUnavailableError("The employee database is unavailable") from e


def parse_object_id(value: str) -> ObjectId:
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdError(f"Invalid record id: {value}")
    return ObjectId(value)


def strip_id(doc: Dict[str, Any]) -> tuple[str, Dict[str, Any]]:
    """Split a stored document into its string id and the remaining fields."""
    fields = dict(doc)
    return str(fields.pop("_id")), fields
