from pydantic import BaseModel, ConfigDict


class UserRecord(BaseModel):
    """Registered user with its clear-text password."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str
