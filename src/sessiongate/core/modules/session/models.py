"""Session management models."""

from datetime import datetime, timedelta
from typing import Any, NewType

from pydantic import BaseModel, Field

from sessiongate.utils import now

SessionHandle = NewType("SessionHandle", str)

USER_ATTRIBUTE = "user"


class Session(BaseModel):
    """Server-held client session keyed by an opaque token.

    The ``user`` attribute is present only while the owner is authenticated.
    """

    id: SessionHandle
    attributes: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=now)
    last_accessed_at: datetime = Field(default_factory=now)

    @property
    def user(self) -> str | None:
        value = self.attributes.get(USER_ATTRIBUTE)
        return value if isinstance(value, str) else None

    def is_expired(self, max_inactive: timedelta, at: datetime) -> bool:
        return at - self.last_accessed_at > max_inactive
