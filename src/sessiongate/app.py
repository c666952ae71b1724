from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sessiongate.config import Config
from sessiongate.core.core import Core
from sessiongate.core.modules.session.models import SessionHandle


class App:
    """Facade for all application operations, the only entry point for the web layer."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @property
    def config(self) -> Config:
        return self._core.config

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    def login(self, username: str | None, password: str | None, handle: SessionHandle | None = None) -> SessionHandle:
        """Authenticate user and bind them to a session."""
        return self._core.services.auth.attempt_login(username, password, handle)

    def logout(self, handle: SessionHandle | None) -> None:
        """Invalidate the session if there is one."""
        self._core.services.auth.logout(handle)

    def probe_user(self, handle: SessionHandle | None) -> str | None:
        """Get the authenticated username, never failing on session lookup errors."""
        return self._core.services.access.probe_user(handle)

    def is_protected_path(self, path: str) -> bool:
        return self._core.services.access.is_protected(path)
