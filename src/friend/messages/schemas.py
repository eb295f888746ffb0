"""Request/response schemas for direct messages."""

from __future__ import annotations

from datetime import datetime

from friend.schemas import CamelModel, LooseNumber, LooseText


class MessageCreate(CamelModel):
    receiver_id: LooseNumber = None
    message: LooseText = None


class MessageResponse(CamelModel):
    id: int
    sender_id: int
    receiver_id: LooseNumber
    message: LooseText = None
    created_at: datetime | None = None
