from __future__ import annotations

import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from ..common.datetime_utils import now_utc


@dataclass(frozen=True)
class SessionEntry:
    account_id: str
    expires_at: datetime


class SessionRegistry:
    """Server-side session store: opaque token -> account reference.

    Only the account id is kept; the account itself is reloaded on every
    request. Entries live for ``lifetime`` and are dropped on logout.
    """

    def __init__(self, lifetime: timedelta, *, clock: Callable[[], datetime] = now_utc):
        self._lifetime = lifetime
        self._clock = clock
        self._entries: Dict[str, SessionEntry] = {}
        self._lock = threading.Lock()

    def open(self, account_id: str) -> str:
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._purge_expired()
            self._entries[token] = SessionEntry(account_id=account_id, expires_at=self._clock() + self._lifetime)
        return token

    def resolve(self, token: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[token]
                return None
            return entry.account_id

    def revoke(self, token: str) -> bool:
        with self._lock:
            return self._entries.pop(token, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _purge_expired(self) -> None:
        now = self._clock()
        for token in [t for t, e in self._entries.items() if e.expires_at <= now]:
            del self._entries[token]
