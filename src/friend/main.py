"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from friend.activities.router import router as activities_router
from friend.auth.router import router as auth_router
from friend.auth.tokens import TokenService
from friend.config import Settings, get_settings
from friend.database import Database
from friend.goals.router import router as goals_router
from friend.health.router import router as health_router
from friend.messages.router import router as messages_router
from friend.middleware import setup_middleware
from friend.ws.router import router as ws_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings: Settings = app.state.settings
    db: Database = app.state.db
    if settings.create_tables:
        await db.create_all()
    logger.info("app_started", environment=settings.environment, database=db.dialect)

    yield

    await db.dispose()
    logger.info("app_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The database handle and token service are built here from ``settings``
    and attached to ``app.state``; request handlers reach them only through
    dependencies.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Backend API for Friend App: accounts, activities, goals and messages",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = Database(settings.database_url, echo=settings.debug)
    app.state.tokens = TokenService.from_settings(settings)

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(activities_router)
    app.include_router(goals_router)
    app.include_router(messages_router)
    app.include_router(ws_router)

    return app
