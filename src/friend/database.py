"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from friend.db import models  # noqa: F401  (registers tables on Base.metadata)
from friend.db.base import Base


class Database:
    """Owns one async engine and its session factory.

    Built once per application from settings and stored on ``app.state``.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = make_url(url)
        engine_kwargs: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
        if self.url.get_backend_name() == "sqlite":
            self._ensure_sqlite_dir()
        else:
            engine_kwargs.update(pool_size=20, max_overflow=10)
        if self.url.get_driver_name() == "asyncpg":
            engine_kwargs["connect_args"] = {"statement_cache_size": 0}

        self.engine: AsyncEngine = create_async_engine(self.url, **engine_kwargs)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def dialect(self) -> str:
        return self.url.get_backend_name()

    def _ensure_sqlite_dir(self) -> None:
        database = self.url.database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)

    async def create_all(self) -> None:
        """Create missing tables (existing tables are left untouched)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> None:
        """Run a trivial statement. Raises if the store is unreachable."""
        async with self.session_factory() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Return the application's Database (FastAPI dependency)."""
    return request.app.state.db


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session (FastAPI dependency)."""
    db: Database = request.app.state.db
    async with db.session_factory() as session:
        yield session
