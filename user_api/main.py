"""User API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery): GET /, GET /health,
      GET /api/users, POST /api/users; nothing else answers with JSON success
    - Auto-generated docs routes disabled and trailing-slash redirects off,
      so every other method/path pair ends in the uniform 404
    - Global error handlers map failures → {"error": message} responses
    - The UserStore is created (and seeded) once per app, owned by app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - create_app(settings) factory + module-level app: uvicorn imports `app`,
      tests can build apps with their own Settings (e.g. a temp static dir)
    - Static files mounted AFTER API routes so API paths take precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from user_api.api.error_handlers import register_error_handlers
from user_api.api.middleware import register_middleware
from user_api.api.routes import health, users, welcome
from user_api.config import Settings, get_settings
from user_api.infrastructure.observability import setup_logging
from user_api.infrastructure.user_store import UserStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"User API started with {len(app.state.user_store)} users",
    )
    yield
    logger.info("User API shutting down")


def create_app(settings: Settings) -> FastAPI:
    """Build the application: store, middleware, routes, static files, handlers."""
    app = FastAPI(
        title="User API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.user_store = UserStore.seeded()

    register_middleware(app, settings)

    # Routes, explicit registration
    app.include_router(welcome.router)
    app.include_router(health.router)
    app.include_router(users.router)

    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir), name="static",
        )

    register_error_handlers(app)
    return app


app = create_app(get_settings())
