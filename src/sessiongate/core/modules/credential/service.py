from types import MappingProxyType

import structlog

from sessiongate.config import Config
from sessiongate.core.core import Service
from sessiongate.core.modules.credential.models import UserRecord
from sessiongate.core.modules.credential.validators import validate_username

logger = structlog.get_logger(__name__)


class CredentialService(Service):
    """Read-only username to password table, populated once from config."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        records = [UserRecord(username=username, password=password) for username, password in config.users.items()]
        for record in records:
            validate_username(record.username)
        self._users: MappingProxyType[str, UserRecord] = MappingProxyType({r.username: r for r in records})

    def lookup(self, username: str) -> str | None:
        """Get the stored password for username, None if unknown."""
        record = self._users.get(username)
        if record is None:
            return None
        return record.password

    async def on_start(self) -> None:
        logger.debug("credential_store_loaded", user_count=len(self._users))
