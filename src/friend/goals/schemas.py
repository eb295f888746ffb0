"""Request/response schemas for goal endpoints."""

from __future__ import annotations

from datetime import datetime

from friend.schemas import CamelModel, LooseNumber, LooseText


class GoalCreate(CamelModel):
    title: LooseText = None
    description: LooseText = None
    category: LooseText = None
    target: LooseNumber = None
    deadline: LooseText = None


class GoalResponse(CamelModel):
    id: int
    user_id: int
    title: LooseText = None
    description: LooseText = None
    category: LooseText = None
    target: LooseNumber = None
    current: LooseNumber = 0
    deadline: LooseText = None
    created_at: datetime | None = None
