"""State managers for handling application-wide mutable state.

This module provides thread-safe state management using asyncio.Lock
for async operations. All state managers inherit from StateManager ABC.
"""

import asyncio
import secrets
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from basecoat.logging_config import get_logger, log_with_context
from basecoat.messages import Messages

logger = get_logger(__name__)


class StateManager(ABC):
    """Base class for all state managers.

    State managers provide thread-safe access to mutable application state.
    All subclasses must implement lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called during app startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called during app shutdown)."""
        pass


@dataclass
class SessionState:
    """Per-visitor state kept between requests."""

    is_logged_in: bool = False
    last_run_route: str | None = None
    messages: Messages = field(default_factory=Messages)
    last_seen: float = field(default_factory=time.time)


class SessionManager(StateManager):
    """Keeps visitor sessions in memory, keyed by an opaque session id.

    Sessions idle for longer than ``ttl_seconds`` are swept whenever a
    session is looked up or created, and by ``purge_expired()``.
    """

    def __init__(self, ttl_seconds: int = 3600):
        """Initialize the session manager."""
        self.ttl_seconds = ttl_seconds
        self._sessions: dict[str, SessionState] = {}
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Initialize the session manager."""
        # No initialization needed for now
        pass

    async def cleanup(self) -> None:
        """Drop all sessions on shutdown."""
        async with self._lock:
            self._sessions.clear()

    def _is_expired(self, session: SessionState, now: float) -> bool:
        return now - session.last_seen > self.ttl_seconds

    def _sweep(self, now: float) -> int:
        """Remove idle sessions. Caller must hold the lock."""
        expired = [sid for sid, session in self._sessions.items() if self._is_expired(session, now)]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    async def get_or_create(self, session_id: str | None) -> tuple[str, SessionState]:
        """Get the session for an id, creating a new one if unknown or expired.

        Args:
            session_id: Session id from the client cookie, if any

        Returns:
            Tuple of the (possibly new) session id and its state
        """
        async with self._lock:
            now = time.time()
            self._sweep(now)
            session = self._sessions.get(session_id) if session_id else None

            if session is None:
                session_id = secrets.token_urlsafe(32)
                session = SessionState()
                self._sessions[session_id] = session
                log_with_context(logger, "debug", "Session created", event_type="session_created")

            session.last_seen = now
            return session_id, session

    async def drop(self, session_id: str) -> None:
        """Forget a session."""
        async with self._lock:
            self._sessions.pop(session_id, None)

    async def purge_expired(self) -> int:
        """Remove idle sessions.

        Returns:
            Number of sessions removed
        """
        async with self._lock:
            purged = self._sweep(time.time())

        if purged:
            log_with_context(
                logger,
                "info",
                "Expired sessions purged",
                purged=purged,
                event_type="session_purge",
            )
        return purged

    async def count(self) -> int:
        """Get the number of live sessions."""
        async with self._lock:
            return len(self._sessions)
