"""Goal router: /api/goals."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from friend.auth.dependencies import get_current_user_id
from friend.goals.repository import GoalRepository, get_goal_repository
from friend.goals.schemas import GoalCreate, GoalResponse
from friend.schemas import CreatedResponse

router = APIRouter(prefix="/api/goals", tags=["Goals"])


@router.post("", response_model=CreatedResponse)
async def add_goal(
    body: GoalCreate,
    user_id: int = Depends(get_current_user_id),
    repo: GoalRepository = Depends(get_goal_repository),
) -> CreatedResponse:
    """Create a goal for the caller."""
    goal_id = await repo.create(user_id, **body.model_dump())
    return CreatedResponse(id=goal_id)


@router.get("", response_model=list[GoalResponse])
async def list_goals(
    user_id: int = Depends(get_current_user_id),
    repo: GoalRepository = Depends(get_goal_repository),
) -> list[GoalResponse]:
    goals = await repo.list_for_owner(user_id)
    return [GoalResponse.model_validate(g) for g in goals]
