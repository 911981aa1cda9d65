from __future__ import annotations

from typing import Optional, Protocol

from .model import UserAccount


class UserRepository(Protocol):
    """Identity Store interface.

    ``create_account`` raises ``ValidationError`` when the username is taken.
    """

    def get_by_id(self, account_id: str) -> Optional[UserAccount]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[UserAccount]:
        raise NotImplementedError

    def create_account(self, *, username: str, password_hash: str) -> UserAccount:
        raise NotImplementedError
