"""Direct message router: /api/messages."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from friend.auth.dependencies import get_current_user_id
from friend.messages.repository import MessageRepository, get_message_repository
from friend.messages.schemas import MessageCreate, MessageResponse
from friend.schemas import CreatedResponse

router = APIRouter(prefix="/api/messages", tags=["Messages"])


@router.post("", response_model=CreatedResponse)
async def send_message(
    body: MessageCreate,
    user_id: int = Depends(get_current_user_id),
    repo: MessageRepository = Depends(get_message_repository),
) -> CreatedResponse:
    """Send a message from the caller to ``receiverId``."""
    message_id = await repo.create(user_id, body.receiver_id, body.message)
    return CreatedResponse(id=message_id)


@router.get("/{other_user_id}", response_model=list[MessageResponse])
async def get_conversation(
    other_user_id: int,
    user_id: int = Depends(get_current_user_id),
    repo: MessageRepository = Depends(get_message_repository),
) -> list[MessageResponse]:
    """Messages between the caller and ``other_user_id``, oldest first."""
    messages = await repo.list_between(user_id, other_user_id)
    return [MessageResponse.model_validate(m) for m in messages]
