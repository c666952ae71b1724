"""Tests for mapping errors to HTTP responses."""

import asyncio
import json

import pytest
from starlette.requests import Request

from sessiongate.errors import (
    AuthenticationError,
    InvalidCredentialsError,
    MissingCredentialsError,
    UserError,
    ValidationError,
)
from sessiongate.web.error_handlers import general_exception_handler, user_error_handler


@pytest.fixture
def request_():
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


def handle(handler, request, exc):
    return asyncio.run(handler(request, exc))


class TestUserErrorHandler:
    @pytest.mark.parametrize("exc", [InvalidCredentialsError(), MissingCredentialsError()])
    def test_credential_errors_redirect_with_error(self, request_, exc):
        response = handle(user_error_handler, request_, exc)
        assert response.status_code == 303
        assert response.headers["location"] == "/login?error=1"

    def test_authentication_error_redirects_to_login(self, request_):
        response = handle(user_error_handler, request_, AuthenticationError())
        assert response.status_code == 302
        assert response.headers["location"] == "/login"

    def test_validation_error(self, request_):
        response = handle(user_error_handler, request_, ValidationError("bad input"))
        assert response.status_code == 400
        assert json.loads(response.body) == {"message": "bad input", "type": "validation_error"}

    def test_other_user_error(self, request_):
        class OtherError(UserError):
            pass

        response = handle(user_error_handler, request_, OtherError("nope"))
        assert response.status_code == 400
        assert json.loads(response.body)["type"] == "bad_request"


class TestGeneralExceptionHandler:
    def test_internal_error_hides_details(self, request_):
        response = handle(general_exception_handler, request_, RuntimeError("secret detail"))
        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["type"] == "internal_server_error"
        assert "secret detail" not in body["message"]
