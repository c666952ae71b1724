from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from sessiongate.web.deps import CurrentUserDep
from sessiongate.web.pages import render_welcome_page
from sessiongate.web.urls import LOGOUT_PATH, WELCOME_PATH

router = APIRouter(tags=["welcome"])


@router.get(
    WELCOME_PATH,
    summary="Welcome page",
    description="Greet the authenticated user. Anonymous callers are redirected to login by the access guard.",
    response_class=HTMLResponse,
)
async def welcome(username: CurrentUserDep) -> HTMLResponse:
    return HTMLResponse(render_welcome_page(username, LOGOUT_PATH))
