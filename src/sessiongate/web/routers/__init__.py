from sessiongate.web.routers.auth import router as auth_router
from sessiongate.web.routers.welcome import router as welcome_router

__all__ = [
    "auth_router",
    "welcome_router",
]
