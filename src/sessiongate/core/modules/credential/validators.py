from sessiongate.errors import ValidationError


def validate_username(username: str) -> None:
    """Validate a configured username.

    Requirements:
    - Not empty
    - No whitespace characters

    Raises:
        ValidationError: If username doesn't meet requirements
    """
    if not username:
        raise ValidationError("Username cannot be empty")

    if any(char.isspace() for char in username):
        raise ValidationError("Username cannot contain whitespace characters")
