from __future__ import annotations

import logging
import secrets
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import INVALID_CREDENTIALS_MESSAGE, MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ValidationError
from .model import SessionUser, UserAccount
from .repository import UserRepository
from .sessions import SessionRegistry

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate users and manage their sessions."""

    def __init__(self, users: UserRepository, sessions: SessionRegistry):
        self._users = users
        self._sessions = sessions
        # Checked against when the username is unknown, so both failures cost one hash check.
        self._dummy_hash = generate_password_hash(secrets.token_urlsafe(16))

    def authenticate(self, username: str, password: str) -> UserAccount:
        username = (username or "").strip()
        user = self._users.get_by_username(username) if username else None

        try:
            ok = check_password_hash(user.password_hash if user else self._dummy_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not user or not ok:
            logger.warning("failed login for username %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
        return user

    def login(self, username: str, password: str) -> SessionUser:
        account = self.authenticate(username, password)
        token = self._sessions.open(account.account_id)
        logger.info("user %s logged in", account.username)
        return SessionUser(token=token, account=account)

    def load_session_user(self, token: str) -> Optional[SessionUser]:
        account_id = self._sessions.resolve(token)
        if account_id is None:
            return None

        account = self._users.get_by_id(account_id)
        if account is None:
            # Account removed out of band: the session can never be valid again.
            self._sessions.revoke(token)
            return None
        return SessionUser(token=token, account=account)

    def logout(self, token: str) -> None:
        self._sessions.revoke(token)

    def create_account(self, *, username: str, password: str) -> UserAccount:
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        account = self._users.create_account(username=username, password_hash=generate_password_hash(password))
        logger.info("created account %s", account.username)
        return account

    def ensure_account(self, *, username: str, password: str) -> UserAccount:
        """Create the account unless the username is already taken."""
        existing = self._users.get_by_username(username.strip())
        if existing:
            return existing
        return self.create_account(username=username, password=password)
