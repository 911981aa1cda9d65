from __future__ import annotations

from dataclasses import dataclass

from flask_login import UserMixin


@dataclass(frozen=True)
class UserAccount:
    """An authenticating principal. Only the salted hash of the password is kept."""

    account_id: str
    username: str
    password_hash: str


@dataclass(frozen=True)
class SessionUser(UserMixin):
    """What Flask-Login sees as ``current_user``.

    ``get_id`` returns the opaque session token, not the account id, so that
    revoking the token server-side makes a copied cookie inert.
    """

    token: str
    account: UserAccount

    @property
    def username(self) -> str:
        return self.account.username

    def get_id(self) -> str:
        return self.token
