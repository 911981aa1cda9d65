from __future__ import annotations

from typing import Any, Mapping, Optional

from pymongo.errors import DuplicateKeyError

from ..core.constants import USER_COLLECTION
from ..core.exceptions import InvalidIdError, ValidationError
from ..database.connection import MongoConnection
from ..database.mongo_base import mongo_errors, parse_object_id
from .model import UserAccount
from .repository import UserRepository


def _to_account(doc: Mapping[str, Any]) -> UserAccount:
    return UserAccount(
        account_id=str(doc["_id"]),
        username=doc["username"],
        password_hash=doc.get("password_hash") or "",
    )


class MongoUserRepository(UserRepository):
    def __init__(self, conn: MongoConnection):
        self._collection = conn.collection(USER_COLLECTION)

    def get_by_id(self, account_id: str) -> Optional[UserAccount]:
        try:
            oid = parse_object_id(account_id)
        except InvalidIdError:
            return None
        with mongo_errors():
            doc = self._collection.find_one({"_id": oid})
        return _to_account(doc) if doc else None

    def get_by_username(self, username: str) -> Optional[UserAccount]:
        with mongo_errors():
            doc = self._collection.find_one({"username": username})
        return _to_account(doc) if doc else None

    def create_account(self, *, username: str, password_hash: str) -> UserAccount:
        doc = {"username": username, "password_hash": password_hash}
        try:
            with mongo_errors():
                result = self._collection.insert_one(doc)
        except DuplicateKeyError:
            raise ValidationError("Username already exists")
        return UserAccount(account_id=str(result.inserted_id), username=username, password_hash=password_hash)
