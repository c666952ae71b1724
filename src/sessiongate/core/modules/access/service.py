import structlog

from sessiongate.config import Config
from sessiongate.core.core import Service
from sessiongate.core.modules.session.models import SessionHandle
from sessiongate.utils import is_sub_path

logger = structlog.get_logger(__name__)


class AccessService(Service):
    """Decides which routes are protected and who may enter them."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._protected_paths = tuple(config.protected_paths)

    def is_protected(self, path: str) -> bool:
        return any(is_sub_path(path, protected) for protected in self._protected_paths)

    def probe_user(self, handle: SessionHandle | None) -> str | None:
        """Resolve the current user, treating any lookup failure as no session."""
        try:
            return self.core.services.auth.current_user(handle)
        except Exception:
            logger.exception("session_probe_failed")
            return None
