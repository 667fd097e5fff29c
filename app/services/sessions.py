"""In-memory admin session store.

A session maps an opaque token (the client-held session marker) to the
authenticated ``AdminIdentity``.  Sessions slide: every successful
``resolve`` pushes the expiry forward by the TTL.  Expired entries are
evicted lazily on access and in bulk by the scheduler's purge job.
"""

from __future__ import annotations

import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from app.core.config import settings
from app.models.admin import AdminIdentity


@dataclass
class _SessionRecord:
    identity: AdminIdentity
    expires_at: datetime


class SessionStore:
    """Create, resolve, and destroy admin sessions."""

    def __init__(self, *, ttl: timedelta | None = None) -> None:
        self._ttl = ttl or timedelta(minutes=settings.SESSION_TTL_MINUTES)
        self._sessions: dict[str, _SessionRecord] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    @property
    def cookie_max_age(self) -> int:
        return int(self._ttl.total_seconds())

    def create(self, identity: AdminIdentity) -> str:
        token = secrets.token_urlsafe(32)
        record = _SessionRecord(identity=identity, expires_at=self._now() + self._ttl)
        with self._lock:
            self._sessions[token] = record
        return token

    def resolve(self, token: str) -> AdminIdentity | None:
        now = self._now()
        with self._lock:
            record = self._sessions.get(token)
            if record is None:
                return None
            if record.expires_at <= now:
                self._sessions.pop(token, None)
                return None
            record.expires_at = now + self._ttl
            return record.identity

    def destroy(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        """Drop every expired session and return how many were removed."""
        now = self._now()
        with self._lock:
            expired = [t for t, r in self._sessions.items() if r.expires_at <= now]
            for token in expired:
                del self._sessions[token]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Return the process-wide session store, creating it on first call."""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
