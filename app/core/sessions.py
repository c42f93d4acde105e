# app/core/sessions.py
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable

from app.core.config import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginSession:
    user_id: int
    expires_at: float


class SessionStore:
    """
    Server-side login sessions keyed by an opaque random token.

    Lifecycle per token:
      - create()  -> Authenticated, expires ``max_age`` seconds later
      - get()     -> user id while not expired, else None
      - destroy() -> gone for good; the token is never reissued

    Expiry is absolute: reading a session does not extend it.
    A user may hold any number of sessions at the same time.

    Route handlers run in FastAPI's threadpool, so every access to the
    map goes through one lock.
    """

    def __init__(self, max_age: int, clock: Callable[[], float] = time.time):
        self.max_age = max_age
        self._clock = clock
        self._sessions: dict[str, LoginSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create(self, user_id: int) -> str:
        """Bind a fresh token to ``user_id`` and return it."""
        self.sweep_expired()
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[token] = LoginSession(
                user_id=user_id,
                expires_at=self._clock() + self.max_age,
            )
        return token

    def get(self, token: str | None) -> int | None:
        """Return the user id for a live session, or None."""
        if not token:
            return None
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._sessions[token]
                return None
            return entry.user_id

    def destroy(self, token: str | None) -> bool:
        """
        Invalidate a live session.

        Returns False if the token does not belong to an authenticated
        session (unknown, already destroyed or expired).
        """
        if not token:
            return False
        with self._lock:
            entry = self._sessions.pop(token, None)
        return entry is not None and entry.expires_at > self._clock()

    def sweep_expired(self) -> int:
        """Drop every expired session; return how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [t for t, s in self._sessions.items() if s.expires_at <= now]
            for t in expired:
                del self._sessions[t]
        if expired:
            logger.debug("Swept %d expired session(s)", len(expired))
        return len(expired)


@lru_cache
def get_session_store() -> SessionStore:
    """Process-wide session store (FastAPI dependency)."""
    return SessionStore(max_age=get_settings().SESSION_MAX_AGE_SECONDS)
