"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from friend.auth.tokens import TokenService
from friend.config import Settings
from friend.main import create_app

TEST_SECRET = "test-secret-do-not-use"  # noqa: S105


def make_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file, ignoring any .env."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'friend-test.db'}",
        jwt_secret=TEST_SECRET,
        log_format="console",
        log_level="WARNING",
        environment="test",
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """App with its schema created; ASGITransport does not run the lifespan."""
    application = create_app(settings)
    await application.state.db.create_all()
    yield application
    await application.state.db.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP test client bound to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def tokens(app: FastAPI) -> TokenService:
    return app.state.tokens


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def signup(
    client: AsyncClient,
    username: str,
    email: str | None = None,
    password: str = "SecureP@ss1",
    full_name: str | None = None,
) -> dict:
    """Helper to register a user. Returns credentials plus the issued token."""
    email = email or f"{username}@friend.app"
    response = await client.post("/api/auth/signup", json={
        "username": username,
        "email": email,
        "password": password,
        "fullName": full_name,
    })
    assert response.status_code == 200, response.text
    data = response.json()
    return {
        "username": username,
        "email": email,
        "password": password,
        "user_id": data["user"]["id"],
        "token": data["token"],
        "headers": bearer(data["token"]),
    }


@pytest_asyncio.fixture
async def alice(client: AsyncClient) -> dict:
    return await signup(client, "alice", full_name="Alice Kumar")


@pytest_asyncio.fixture
async def bob(client: AsyncClient) -> dict:
    return await signup(client, "bob", full_name="Bob Singh")
