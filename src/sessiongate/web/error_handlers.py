import logging

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from sessiongate.errors import (
    AuthenticationError,
    InvalidCredentialsError,
    MissingCredentialsError,
    ValidationError,
)
from sessiongate.web.urls import LOGIN_PATH

logger = logging.getLogger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses.

    Authentication errors become redirects to the login page, so they are
    never shown to the end user as errors.
    """
    if isinstance(exc, MissingCredentialsError | InvalidCredentialsError):
        return RedirectResponse(f"{LOGIN_PATH}?error=1", status_code=303)
    if isinstance(exc, AuthenticationError):
        return RedirectResponse(LOGIN_PATH, status_code=302)

    if isinstance(exc, ValidationError):
        error_type = "validation_error"
    else:
        error_type = "bad_request"
    return create_json_error_response(status_code=400, message=str(exc), error_type=error_type)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
