from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    # Credential table, JSON object in SESSIONGATE_USERS
    users: dict[str, str] = {"alice": "1234", "bob": "abcd"}
    protected_paths: list[str] = ["/benvenuto", "/logout"]
    session_cookie_name: str = "session_id"
    session_max_inactive_seconds: int = 30 * 60
    remember_cookie_name: str = "utente"  # Remembers the last username, never used for auth
    remember_cookie_max_age: int = 30 * 24 * 60 * 60
    secure_cookies: bool = False  # Set to True in production with HTTPS

    model_config = {
        "env_file": [".env"],
        "env_prefix": "SESSIONGATE_",
        "extra": "ignore",
    }
