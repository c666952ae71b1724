from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Form, Query
from fastapi.responses import HTMLResponse, RedirectResponse

from sessiongate.web.deps import AppDep, SessionHandleDep
from sessiongate.web.pages import render_login_page
from sessiongate.web.urls import LOGIN_PATH, LOGOUT_PATH, WELCOME_PATH

router = APIRouter(tags=["auth"])


@router.get(
    LOGIN_PATH,
    summary="Login form",
    description="Render the login form, with an invalid-credentials message when error=1.",
    response_class=HTMLResponse,
)
async def login_form(error: Annotated[str | None, Query()] = None) -> HTMLResponse:
    return HTMLResponse(render_login_page(LOGIN_PATH, error == "1"))


@router.post(
    LOGIN_PATH,
    summary="Authenticate user",
    description="Check submitted credentials and redirect to the welcome page on success.",
    responses={
        303: {"description": "Redirect to the welcome page, or back to the login form with error=1"},
    },
)
async def login(
    app: AppDep,
    handle: SessionHandleDep,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> RedirectResponse:
    """Authenticate user and bind them to a session.

    Failures raise authentication errors, which the error handlers turn into
    a redirect back to the login form.
    """
    config = app.config
    session_handle = app.login(username, password, handle)

    response = RedirectResponse(WELCOME_PATH, status_code=303)
    response.set_cookie(
        key=config.session_cookie_name,
        value=session_handle,
        httponly=True,
        samesite="lax",
        secure=config.secure_cookies,
    )
    # Convenience only, remembers the last username for the client, percent-encoded
    response.set_cookie(
        key=config.remember_cookie_name,
        value=quote(username, safe=""),
        max_age=config.remember_cookie_max_age,
        samesite="lax",
        secure=config.secure_cookies,
    )
    return response


@router.get(
    LOGOUT_PATH,
    summary="End session",
    description="Invalidate the current session and redirect to the login form.",
    responses={302: {"description": "Redirect to the login form"}},
)
async def logout(app: AppDep, handle: SessionHandleDep) -> RedirectResponse:
    app.logout(handle)
    response = RedirectResponse(LOGIN_PATH, status_code=302)
    response.delete_cookie(app.config.session_cookie_name)
    return response
