"""
Session token issuance and verification.

Tokens are HS256 JWTs carrying the user id in ``sub`` and an expiry. The
signing secret is handed to :class:`TokenService` at construction; the
application keeps a single instance on ``app.state``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from fastapi import Request

from friend.config import Settings


class InvalidToken(Exception):
    """The token is malformed, unsigned, tampered with or expired."""


class TokenService:
    """Issue and verify signed, time-limited session tokens."""

    def __init__(self, secret: str, *, algorithm: str = "HS256", lifetime: timedelta = timedelta(days=7)) -> None:
        if not secret:
            msg = "Token signing secret must not be empty"
            raise ValueError(msg)
        self._secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenService:
        return cls(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            lifetime=timedelta(days=settings.jwt_expire_days),
        )

    def issue(self, user_id: int, *, now: datetime | None = None) -> str:
        """
        Create a token for ``user_id`` that expires ``lifetime`` after ``now``.

        Args:
            user_id: The user's database ID.
            now: Issue time; defaults to the current UTC time.

        Returns:
            Encoded JWT string.
        """
        issued_at = now or datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """
        Verify a token and return the embedded user id.

        Raises:
            InvalidToken: If the token cannot be trusted for any reason.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            msg = "Token has expired"
            raise InvalidToken(msg) from None
        except jwt.InvalidTokenError as e:
            raise InvalidToken(str(e)) from e

        try:
            return int(payload["sub"])
        except (TypeError, ValueError):
            msg = "Token subject is not a user id"
            raise InvalidToken(msg) from None


def get_token_service(request: Request) -> TokenService:
    """Return the application's TokenService (FastAPI dependency)."""
    return request.app.state.tokens
