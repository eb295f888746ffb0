"""Health, readiness, status, API info and docs index endpoints."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from friend.database import Database, get_database
from friend.ws.manager import manager

router = APIRouter()

_started = time.monotonic()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
async def health(request: Request) -> dict[str, object]:
    """Liveness probe — returns 200 if the process is alive."""
    settings = request.app.state.settings
    return {
        "status": "ok",
        "database": request.app.state.db.dialect,
        "environment": settings.environment,
        "timestamp": _now(),
        "uptime": round(time.monotonic() - _started, 3),
    }


@router.get("/ready")
async def readiness(db: Database = Depends(get_database)) -> dict[str, object]:
    """Readiness probe — checks DB connectivity."""
    checks: dict[str, object] = {}
    try:
        await db.ping()
        checks["database"] = "ok"
    except Exception as exc:  # noqa: BLE001
        checks["database"] = f"error: {exc}"

    all_ok = all(v == "ok" for v in checks.values())
    return {"status": "ready" if all_ok else "degraded", "checks": checks}


@router.get("/status")
async def status() -> dict[str, object]:
    """Service status, including the real-time channel."""
    return {
        "status": "online",
        "service": "friend-api",
        "timestamp": _now(),
        "realtime": manager.get_stats(),
    }


@router.get("/api/v1")
async def api_info(request: Request) -> dict[str, str]:
    """Name, version and auth scheme of this API."""
    settings = request.app.state.settings
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "auth": "JWT Token Required",
        "database": request.app.state.db.dialect,
    }


@router.get("/api-docs")
async def api_docs(request: Request) -> dict[str, object]:
    """Placeholder index of the API; the interactive docs are served at /docs in debug mode."""
    settings = request.app.state.settings
    return {
        "message": "API Documentation",
        "note": "Interactive docs at /docs" if settings.debug else "Enable FRIEND_DEBUG for interactive docs at /docs",
        "endpoints": {
            "auth": "/api/auth",
            "activities": "/api/activities",
            "goals": "/api/goals",
            "messages": "/api/messages",
            "realtime": "/ws",
        },
    }
