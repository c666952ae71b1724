"""Access guard middleware for protected routes."""

from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from fastapi.responses import RedirectResponse

from sessiongate.app import App
from sessiongate.core.modules.session.models import SessionHandle
from sessiongate.web.urls import LOGIN_PATH

logger = structlog.get_logger(__name__)


def create_access_guard(app: App) -> Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]:
    """Build an HTTP middleware redirecting anonymous callers of protected routes to login."""

    async def access_guard(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        path = request.url.path
        if not app.is_protected_path(path):
            return await call_next(request)

        cookie = request.cookies.get(app.config.session_cookie_name)
        username = app.probe_user(SessionHandle(cookie) if cookie else None)
        if username is None:
            logger.info("access_denied", path=path)
            return RedirectResponse(LOGIN_PATH, status_code=302)

        # Handlers read the user from here instead of checking the session again
        request.state.user = username
        return await call_next(request)

    return access_guard
