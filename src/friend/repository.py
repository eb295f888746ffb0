"""
Base repository for owner-scoped resources.

A repository wraps one ``AsyncSession`` handed in at construction. Every
write is a single INSERT committed on its own; a failing statement is rolled
back and surfaced as :class:`~friend.errors.PersistenceError`.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from friend.db.base import Base
from friend.errors import PersistenceError

logger = structlog.get_logger()

T = TypeVar("T", bound=Base)

# The driver raises OverflowError itself (not a DBAPI error) for integers beyond int64.
STORE_ERRORS: tuple[type[Exception], ...] = (SQLAlchemyError, OverflowError)


class OwnedRepository(Generic[T]):
    """Insert rows and list them back, scoped to the caller's user id."""

    model: ClassVar[type[Base]]
    resource: ClassVar[str]
    create_error: ClassVar[str] = "Failed to create record"
    list_error: ClassVar[str] = "Failed to fetch records"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _insert(self, **values: Any) -> int:
        """Insert one row and commit. Returns the new primary key."""
        row = self.model(**values)
        self.session.add(row)
        try:
            await self.session.flush()
            row_id: int = row.id  # type: ignore[attr-defined]
            await self.session.commit()
        except STORE_ERRORS as e:
            await self.session.rollback()
            logger.error("persistence_error", resource=self.resource, op="create", error=str(e))
            raise PersistenceError(self.create_error) from e
        return row_id

    async def _fetch_all(self, stmt: Any) -> list[T]:
        try:
            result = await self.session.execute(stmt)
        except STORE_ERRORS as e:
            await self.session.rollback()
            logger.error("persistence_error", resource=self.resource, op="list", error=str(e))
            raise PersistenceError(self.list_error) from e
        return list(result.scalars().all())
