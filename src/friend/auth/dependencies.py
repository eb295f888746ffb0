"""FastAPI authentication dependencies."""

from __future__ import annotations

import structlog
from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from friend.auth.tokens import InvalidToken, TokenService, get_token_service
from friend.errors import Unauthorized

logger = structlog.get_logger()

_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """
    Extract and verify the bearer token, return the caller's user id.

    Only the token is checked; the user row is not loaded.
    Raises Unauthorized on a missing or untrusted token.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("No token provided")

    try:
        user_id = tokens.verify(credentials.credentials)
    except InvalidToken as e:
        logger.info("token_rejected", reason=str(e))
        raise Unauthorized("Invalid token") from e

    structlog.contextvars.bind_contextvars(user_id=user_id)
    return user_id
