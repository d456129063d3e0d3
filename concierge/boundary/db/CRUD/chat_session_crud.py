"""
Chat session CRUD operations.

Session lookups by owner and status, batch status updates and context
replacement for ChatSessionModel.

Dependencies: sqlalchemy, concierge.boundary.db.models
System role: Chat session persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from concierge.boundary.db.CRUD.base_crud import BaseCRUD
from concierge.boundary.db.models.chat_session_model import ChatSessionModel, ChatSessionStatus


class ChatSessionCRUD(BaseCRUD[ChatSessionModel]):
    """
    CRUD operations for ChatSessionModel.

    "Latest" always means greatest created_at.
    """

    def __init__(self) -> None:
        """Initialize ChatSessionCRUD with ChatSessionModel."""
        super().__init__(ChatSessionModel)

    async def get_for_user(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> ChatSessionModel | None:
        """
        Retrieve a session by id only if it belongs to the user.

        Args:
            session: Async database session
            id: Chat session UUID
            user_id: Expected owner

        Returns:
            ChatSessionModel if found and owned by user_id, None otherwise
        """
        return await self.find_first(
            session,
            ChatSessionModel.id == id,
            ChatSessionModel.user_id == user_id,
        )

    async def get_latest_active(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> ChatSessionModel | None:
        """
        Retrieve the most recently created ACTIVE session of a user.

        Args:
            session: Async database session
            user_id: Session owner

        Returns:
            Newest ACTIVE ChatSessionModel, None if the user has none
        """
        return await self.find_first(
            session,
            ChatSessionModel.user_id == user_id,
            ChatSessionModel.status == ChatSessionStatus.ACTIVE,
            order_by=(ChatSessionModel.created_at.desc(),),
        )

    async def list_active_ids(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[UUID]:
        """
        List ids of every ACTIVE session of a user.

        Args:
            session: Async database session
            user_id: Session owner

        Returns:
            Sequence of session UUIDs (normally zero or one)
        """
        stmt = select(ChatSessionModel.id).where(
            ChatSessionModel.user_id == user_id,
            ChatSessionModel.status == ChatSessionStatus.ACTIVE,
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_status_many(
        self,
        session: AsyncSession,
        ids: Sequence[UUID],
        status: ChatSessionStatus,
    ) -> int:
        """
        Set the status of several sessions in one statement.

        Args:
            session: Async database session
            ids: Session UUIDs to update; unknown ids are ignored
            status: New status

        Returns:
            Number of sessions matched
        """
        if not ids:
            return 0
        return await self.update_many(
            session,
            ChatSessionModel.id.in_(list(ids)),
            status=status,
        )

    async def update_context(
        self,
        session: AsyncSession,
        id: UUID,
        context: Any,
    ) -> int:
        """
        Replace the context of a session.

        Args:
            session: Async database session
            id: Chat session UUID
            context: New JSON-serialisable context (no merge)

        Returns:
            Number of sessions matched (0 or 1)
        """
        return await self.update_many(session, ChatSessionModel.id == id, context=context)


chat_session_crud = ChatSessionCRUD()
