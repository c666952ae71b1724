import secrets
from datetime import timedelta

import structlog

from sessiongate.config import Config
from sessiongate.core.core import Service
from sessiongate.core.modules.session.models import Session, SessionHandle
from sessiongate.utils import now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """In-memory session store with idle expiry."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._sessions: dict[SessionHandle, Session] = {}
        self._max_inactive = timedelta(seconds=config.session_max_inactive_seconds)

    def create_session(self) -> Session:
        """Create an anonymous session, dropping idle-expired ones first."""
        self.purge_expired()
        session = Session(id=SessionHandle(secrets.token_urlsafe(32)))
        self._sessions[session.id] = session
        logger.debug("session_created")
        return session

    def get_session(self, handle: SessionHandle | None) -> Session | None:
        """Probe for a live session, never creates one."""
        if not handle:
            return None

        session = self._sessions.get(handle)
        if session is None:
            return None

        current_time = now()
        if session.is_expired(self._max_inactive, current_time):
            del self._sessions[handle]
            logger.debug("session_expired", user=session.user)
            return None

        session.last_accessed_at = current_time
        return session

    def invalidate_session(self, handle: SessionHandle | None) -> None:
        """Drop the session and its attributes, no-op if absent."""
        if not handle:
            return
        session = self._sessions.pop(handle, None)
        if session is not None:
            session.attributes.clear()
            logger.debug("session_invalidated", user=session.user)

    def purge_expired(self) -> int:
        """Remove all idle-expired sessions, return how many were removed."""
        current_time = now()
        expired = [h for h, s in self._sessions.items() if s.is_expired(self._max_inactive, current_time)]
        for handle in expired:
            del self._sessions[handle]
        if expired:
            logger.debug("sessions_purged", count=len(expired))
        return len(expired)

    def count(self) -> int:
        return len(self._sessions)

    async def on_stop(self) -> None:
        self._sessions.clear()
