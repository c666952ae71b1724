from typing import Annotated, cast

from fastapi import Depends, Request

from sessiongate.app import App
from sessiongate.core.modules.session.models import SessionHandle


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_session_handle(request: Request, app: Annotated[App, Depends(get_app)]) -> SessionHandle | None:
    """Read the session handle from the session cookie, never creating a session."""
    value = request.cookies.get(app.config.session_cookie_name)
    return SessionHandle(value) if value else None


async def get_current_user(request: Request) -> str:
    """Get the username the access guard resolved for this protected request."""
    return cast(str, request.state.user)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
SessionHandleDep = Annotated[SessionHandle | None, Depends(get_session_handle)]
CurrentUserDep = Annotated[str, Depends(get_current_user)]
