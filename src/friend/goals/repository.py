"""Goal persistence, scoped to the owning user."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from friend.database import get_session
from friend.db.models import Goal
from friend.repository import OwnedRepository

logger = structlog.get_logger()


class GoalRepository(OwnedRepository[Goal]):
    model = Goal
    resource = "goals"
    create_error = "Failed to create goal"
    list_error = "Failed to fetch goals"

    async def create(self, owner_id: int, **fields: Any) -> int:
        """Insert a goal for ``owner_id``; progress starts at zero."""
        goal_id = await self._insert(user_id=owner_id, **fields)
        logger.info("goal_created", goal_id=goal_id, user_id=owner_id)
        return goal_id

    async def list_for_owner(self, owner_id: int) -> list[Goal]:
        """All of the owner's goals, soonest deadline first."""
        stmt = (
            select(Goal)
            .where(Goal.user_id == owner_id)
            .order_by(Goal.deadline.asc(), Goal.id.asc())
        )
        return await self._fetch_all(stmt)


def get_goal_repository(session: AsyncSession = Depends(get_session)) -> GoalRepository:
    return GoalRepository(session)
