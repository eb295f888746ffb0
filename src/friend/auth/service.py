"""
Credential store.

Persists user records and checks credentials. Passwords are hashed with
argon2id before they reach the database and are never read back out.
"""

from __future__ import annotations

import structlog
from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from friend.auth.password import check_needs_rehash, hash_password, verify_password
from friend.database import get_session
from friend.db.models import User
from friend.errors import ConflictError, NotFound, PersistenceError, Unauthorized
from friend.repository import STORE_ERRORS

logger = structlog.get_logger()


class UserStore:
    """User persistence and credential checks."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def _get(self, *criteria: object) -> User | None:
        try:
            result = await self.session.execute(select(User).where(*criteria))
        except STORE_ERRORS as e:
            await self.session.rollback()
            logger.error("persistence_error", resource="users", op="get", error=str(e))
            raise PersistenceError("Failed to fetch user") from e
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> User:
        """Fetch the full record for ``email`` (exact match)."""
        user = await self._get(User.email == email)
        if user is None:
            raise NotFound("User not found")
        return user

    async def find_by_id(self, user_id: int) -> User:
        """Fetch a user by ID. Callers project it through ``UserResponse``."""
        user = await self._get(User.id == user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    # ------------------------------------------------------------------
    # Registration / login
    # ------------------------------------------------------------------

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        full_name: str | None = None,
    ) -> User:
        """
        Create a user with a freshly hashed password.

        Raises:
            ConflictError: If the username or email is already taken.
            PersistenceError: If the store rejects the insert for any other reason.
        """
        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            full_name=full_name,
            bio=None,
            profile_pic=None,
        )
        self.session.add(user)
        try:
            await self.session.flush()
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.info("signup_conflict", username=username, email=email)
            raise ConflictError("Username or email already exists") from e
        except STORE_ERRORS as e:
            await self.session.rollback()
            logger.error("persistence_error", resource="users", op="register", error=str(e))
            raise PersistenceError("Signup failed") from e

        logger.info("user_registered", user_id=user.id, username=username)
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """
        Check an email + password pair.

        Raises:
            Unauthorized: If the email is unknown or the password is wrong.
        """
        try:
            user = await self.find_by_email(email)
        except NotFound:
            logger.info("login_failed", reason="unknown_email")
            raise Unauthorized("Invalid email or password") from None

        if not verify_password(password, user.password_hash):
            logger.info("login_failed", reason="bad_password", user_id=user.id)
            raise Unauthorized("Invalid email or password")

        if check_needs_rehash(user.password_hash):
            await self._rehash(user, password)

        logger.info("user_logged_in", user_id=user.id)
        return user

    async def _rehash(self, user: User, password: str) -> None:
        """Re-hash with the current argon2 parameters after a successful login."""
        user.password_hash = hash_password(password)
        try:
            await self.session.commit()
        except STORE_ERRORS as e:
            await self.session.rollback()
            logger.error("persistence_error", resource="users", op="rehash", error=str(e))
            raise PersistenceError("Login failed") from e
        logger.info("password_rehashed", user_id=user.id)


def get_user_store(session: AsyncSession = Depends(get_session)) -> UserStore:
    """Build a UserStore bound to the request's session (FastAPI dependency)."""
    return UserStore(session)
