import secrets

import structlog

from sessiongate.core.core import Service
from sessiongate.core.modules.session.models import USER_ATTRIBUTE, SessionHandle
from sessiongate.errors import InvalidCredentialsError, MissingCredentialsError

logger = structlog.get_logger(__name__)


class AuthService(Service):
    """Login/logout state machine over the session store.

    A session is Anonymous until attempt_login binds the ``user`` attribute,
    and logout discards the session entirely.
    """

    def attempt_login(self, username: str | None, password: str | None, handle: SessionHandle | None = None) -> SessionHandle:
        """Check credentials and mark a session as authenticated.

        Reuses the session named by handle when it is still alive and anonymous
        or already bound to the same user, otherwise creates a new one. Nothing
        is created or changed on failure.

        Raises:
            MissingCredentialsError: If username or password is empty
            InvalidCredentialsError: If the user is unknown or the password does not match
        """
        if not username or not password:
            logger.info("login_failed", reason="missing_credentials")
            raise MissingCredentialsError

        stored_password = self.core.services.credential.lookup(username)
        if stored_password is None or not secrets.compare_digest(stored_password.encode(), password.encode()):
            logger.info("login_failed", reason="invalid_credentials", username=username)
            raise InvalidCredentialsError

        sessions = self.core.services.session
        session = sessions.get_session(handle)
        if session is not None and session.user not in (None, username):
            # A session bound to another user is never handed over
            sessions.invalidate_session(session.id)
            session = None
        if session is None:
            session = sessions.create_session()
        session.attributes[USER_ATTRIBUTE] = username
        logger.info("login_succeeded", username=username)
        return session.id

    def logout(self, handle: SessionHandle | None) -> None:
        """Invalidate the session, idempotent."""
        username = self.current_user(handle)
        self.core.services.session.invalidate_session(handle)
        if username is not None:
            logger.info("logout", username=username)

    def current_user(self, handle: SessionHandle | None) -> str | None:
        session = self.core.services.session.get_session(handle)
        if session is None:
            return None
        return session.user
