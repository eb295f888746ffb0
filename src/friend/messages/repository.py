"""
Direct message persistence.

Messages are written once and never changed. A conversation is read back
with one query matching the sender/receiver pair in either direction.
"""

from __future__ import annotations

import structlog
from fastapi import Depends
from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from friend.database import get_session
from friend.db.models import Message
from friend.repository import OwnedRepository
from friend.schemas import LooseNumber, LooseText

logger = structlog.get_logger()


class MessageRepository(OwnedRepository[Message]):
    model = Message
    resource = "messages"
    create_error = "Failed to send message"
    list_error = "Failed to fetch messages"

    async def create(self, sender_id: int, receiver_id: LooseNumber, message: LooseText) -> int:
        """Store a message from ``sender_id`` to ``receiver_id``. Returns the new id."""
        message_id = await self._insert(sender_id=sender_id, receiver_id=receiver_id, message=message)
        logger.info("message_sent", message_id=message_id, sender_id=sender_id, receiver_id=receiver_id)
        return message_id

    async def list_between(self, user_id: int, other_user_id: int) -> list[Message]:
        """Every message exchanged between the two users, oldest first."""
        stmt = (
            select(Message)
            .where(
                or_(
                    and_(Message.sender_id == user_id, Message.receiver_id == other_user_id),
                    and_(Message.sender_id == other_user_id, Message.receiver_id == user_id),
                )
            )
            .order_by(Message.created_at.asc(), Message.id.asc())
        )
        return await self._fetch_all(stmt)


def get_message_repository(session: AsyncSession = Depends(get_session)) -> MessageRepository:
    return MessageRepository(session)
