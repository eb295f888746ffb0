"""Activity router: /api/activities."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from friend.activities.repository import ActivityRepository, get_activity_repository
from friend.activities.schemas import ActivityCreate, ActivityResponse
from friend.auth.dependencies import get_current_user_id
from friend.schemas import CreatedResponse

router = APIRouter(prefix="/api/activities", tags=["Activities"])


@router.post("", response_model=CreatedResponse)
async def add_activity(
    body: ActivityCreate,
    user_id: int = Depends(get_current_user_id),
    repo: ActivityRepository = Depends(get_activity_repository),
) -> CreatedResponse:
    """Log an activity for the caller."""
    activity_id = await repo.create(user_id, **body.model_dump())
    return CreatedResponse(id=activity_id)


@router.get("", response_model=list[ActivityResponse])
async def list_activities(
    user_id: int = Depends(get_current_user_id),
    repo: ActivityRepository = Depends(get_activity_repository),
) -> list[ActivityResponse]:
    """The caller's activities, newest date first."""
    activities = await repo.list_for_owner(user_id)
    return [ActivityResponse.model_validate(a) for a in activities]
