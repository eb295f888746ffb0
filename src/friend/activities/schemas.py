"""Request/response schemas for activity endpoints."""

from __future__ import annotations

from datetime import datetime

from friend.schemas import CamelModel, LooseNumber, LooseText


class ActivityCreate(CamelModel):
    type: LooseText = None
    title: LooseText = None
    duration: LooseNumber = None
    mood: LooseText = None
    score: LooseNumber = None
    date: LooseText = None


class ActivityResponse(CamelModel):
    id: int
    user_id: int
    type: LooseText = None
    title: LooseText = None
    duration: LooseNumber = None
    mood: LooseText = None
    score: LooseNumber = None
    date: LooseText = None
    created_at: datetime | None = None
