"""Activity persistence, scoped to the owning user."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from friend.database import get_session
from friend.db.models import Activity
from friend.repository import OwnedRepository

logger = structlog.get_logger()


class ActivityRepository(OwnedRepository[Activity]):
    model = Activity
    resource = "activities"
    create_error = "Failed to add activity"
    list_error = "Failed to fetch activities"

    async def create(self, owner_id: int, **fields: Any) -> int:
        """Insert an activity for ``owner_id``. Returns the new id."""
        activity_id = await self._insert(user_id=owner_id, **fields)
        logger.info("activity_created", activity_id=activity_id, user_id=owner_id)
        return activity_id

    async def list_for_owner(self, owner_id: int) -> list[Activity]:
        """All of the owner's activities, newest ``date`` first."""
        stmt = (
            select(Activity)
            .where(Activity.user_id == owner_id)
            .order_by(Activity.date.desc(), Activity.id.desc())
        )
        return await self._fetch_all(stmt)


def get_activity_repository(session: AsyncSession = Depends(get_session)) -> ActivityRepository:
    return ActivityRepository(session)
