from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(UTC)


def is_sub_path(path: str, prefix: str) -> bool:
    """Check if path equals prefix or lies below it."""
    prefix = prefix.rstrip("/")
    if not prefix:
        return True
    return path == prefix or path.startswith(prefix + "/")
