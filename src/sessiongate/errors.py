from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class AuthenticationError(UserError):
    """Raised when authentication fails or is required."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class MissingCredentialsError(AuthenticationError):
    """Raised when username or password was not submitted."""

    def __init__(self, message: str = "Username and password are required") -> None:
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when the username is unknown or the password does not match.

    Both cases share one error so callers cannot tell which usernames exist.
    """

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""
