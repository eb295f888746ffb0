"""Global error handlers: every failure becomes ``{"error": ...}`` JSON."""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from friend.errors import FriendError

logger = structlog.get_logger()


def setup_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(FriendError)
    async def friend_error_handler(request: Request, exc: FriendError) -> JSONResponse:
        """Map domain errors to their status code."""
        if exc.status_code >= 500:
            logger.error("request_failed", path=request.url.path, method=request.method, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Unknown routes, wrong methods and other framework-level HTTP errors."""
        content: dict[str, object] = {"error": exc.detail}
        if exc.status_code == 404:
            content.update(error="Endpoint not found", path=request.url.path, method=request.method)
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        """Unparseable bodies and bad path parameters are client errors."""
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions — always return JSON."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )
