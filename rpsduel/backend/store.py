"""Session store interface and in-memory implementation for pending challenges."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

from rpsduel.backend.models import Session

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    def create(self, session_id: str, challenger_id: str, choice: str) -> Session:
        """Record a pending challenge, replacing any entry with the same id."""

    def take(self, session_id: str) -> Session | None:
        """Remove and return the live session, or None when absent or expired."""

    def __contains__(self, session_id: object) -> bool:
        """Whether a live session exists, without consuming it."""

    def sweep(self) -> int:
        """Drop expired sessions and return how many were removed."""

    def __len__(self) -> int:
        """Number of stored sessions."""


@dataclass
class InMemorySessionStore:
    ttl_seconds: float | None = None
    clock: Callable[[], float] = field(default=time.monotonic)

    def __post_init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def create(self, session_id: str, challenger_id: str, choice: str) -> Session:
        session = Session(
            session_id=session_id,
            challenger_id=challenger_id,
            choice=choice,
            created_at=self.clock(),
        )
        with self._lock:
            self._sessions[session_id] = session
        logger.debug("session %s created for %s", session_id, challenger_id)
        return session

    def take(self, session_id: str) -> Session | None:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return None
        if self._is_expired(session, self.clock()):
            logger.info("session %s expired before it was resolved", session_id)
            return None
        return session

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            session = self._sessions.get(session_id) if isinstance(session_id, str) else None
        return session is not None and not self._is_expired(session, self.clock())

    def sweep(self) -> int:
        if self.ttl_seconds is None:
            return 0
        now = self.clock()
        with self._lock:
            expired = [key for key, session in self._sessions.items() if self._is_expired(session, now)]
            for key in expired:
                del self._sessions[key]
        if expired:
            logger.info("swept %d expired sessions", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _is_expired(self, session: Session, now: float) -> bool:
        return self.ttl_seconds is not None and now - session.created_at >= self.ttl_seconds


def create_store(ttl_seconds: float | None = None) -> SessionStore:
    return InMemorySessionStore(ttl_seconds=ttl_seconds)
