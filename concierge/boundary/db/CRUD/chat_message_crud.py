"""
Chat message CRUD operations.

Append and windowed reads of ChatMessageModel rows within one session.

Dependencies: sqlalchemy, concierge.boundary.db.models
System role: Chat message persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from concierge.boundary.db.CRUD.base_crud import BaseCRUD
from concierge.boundary.db.models.chat_message_model import ChatMessageModel, ChatMessageSender


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel."""

    def __init__(self) -> None:
        """Initialize ChatMessageCRUD with ChatMessageModel."""
        super().__init__(ChatMessageModel)

    async def create_for_session(
        self,
        session: AsyncSession,
        session_id: UUID,
        sender: ChatMessageSender,
        content: str,
        metadata: Any = None,
    ) -> ChatMessageModel:
        """
        Insert a message under a chat session.

        Args:
            session: Async database session
            session_id: Owning chat session UUID
            sender: Message author
            content: Message text
            metadata: Optional JSON annotation

        Returns:
            Created ChatMessageModel with id and created_at populated
        """
        return await self.create(
            session,
            session_id=session_id,
            sender=sender,
            content=content,
            message_metadata=metadata,
        )

    async def get_recent(
        self,
        session: AsyncSession,
        session_id: UUID,
        limit: int,
    ) -> Sequence[ChatMessageModel]:
        """
        Retrieve the newest messages of a session, newest first.

        Args:
            session: Async database session
            session_id: Chat session UUID
            limit: Maximum number of messages

        Returns:
            Sequence of ChatMessageModels ordered by created_at descending
        """
        return await self.find_many(
            session,
            ChatMessageModel.session_id == session_id,
            order_by=(ChatMessageModel.created_at.desc(),),
            limit=limit,
        )

    async def get_first(
        self,
        session: AsyncSession,
        session_id: UUID,
        limit: int,
    ) -> Sequence[ChatMessageModel]:
        """
        Retrieve the oldest messages of a session, oldest first.

        Args:
            session: Async database session
            session_id: Chat session UUID
            limit: Maximum number of messages

        Returns:
            Sequence of ChatMessageModels ordered by created_at ascending
        """
        return await self.find_many(
            session,
            ChatMessageModel.session_id == session_id,
            order_by=(ChatMessageModel.created_at.asc(),),
            limit=limit,
        )


chat_message_crud = ChatMessageCRUD()
