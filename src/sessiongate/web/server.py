from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sessiongate.app import App
from sessiongate.config import Config
from sessiongate.errors import UserError
from sessiongate.web.error_handlers import general_exception_handler, user_error_handler
from sessiongate.web.guard import create_access_guard
from sessiongate.web.routers import auth_router, welcome_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="SessionGate",
        lifespan=lifespan,
    )
    app.state.app = app_instance

    # Runs before any protected route handler
    app.middleware("http")(create_access_guard(app_instance))

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(auth_router)
    app.include_router(welcome_router)

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app
