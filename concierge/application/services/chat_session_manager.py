"""
Chat session lifecycle manager.

Owns creation, lookup, archival and context updates of a user's chat
session, plus ordered append/read of its messages.

Every write is committed on its own. Multi-step operations are not
transactional: if the create step of reset_session fails, the user is left
with no ACTIVE session until the next call creates one. Two concurrent
get_or_create_active_session calls for the same user can each insert a
session; the "one ACTIVE session per user" rule is eventual and is restored
by the next reset.

Dependencies: sqlalchemy, concierge.boundary.db.CRUD, concierge.core.session_status
System role: Chat session use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import set_committed_value

from concierge.boundary.db.CRUD.chat_message_crud import ChatMessageCRUD, chat_message_crud
from concierge.boundary.db.CRUD.chat_session_crud import ChatSessionCRUD, chat_session_crud
from concierge.boundary.db.models import (
    ChatMessageModel,
    ChatMessageSender,
    ChatSessionModel,
    ChatSessionStatus,
)
from concierge.core.session_status import INITIAL_STATUS, ensure_transition
from concierge.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

DEFAULT_RECENT_MESSAGES = 8
ACTIVE_SESSION_MESSAGE_LIMIT = 50


class ChatSessionManager:
    """
    Chat session lifecycle manager.

    Constructed per request around an injected AsyncSession. Not-found
    conditions on writes are silent no-ops; storage errors propagate.
    """

    def __init__(
        self,
        db: AsyncSession,
        session_crud: ChatSessionCRUD = chat_session_crud,
        message_crud: ChatMessageCRUD = chat_message_crud,
    ) -> None:
        """
        Initialize the manager.

        Args:
            db: Async SQLAlchemy session used for every store call
            session_crud: Chat session data access
            message_crud: Chat message data access
        """
        self.db = db
        self.session_crud = session_crud
        self.message_crud = message_crud

    async def _create_session(self, user_id: str) -> ChatSessionModel:
        chat_session = await self.session_crud.create(
            self.db,
            user_id=user_id,
            status=INITIAL_STATUS,
        )
        await self.db.commit()
        await self.db.refresh(chat_session)
        log_with_context(
            logger,
            logging.INFO,
            "Created chat session",
            user_id=user_id,
            session_id=chat_session.id,
        )
        return chat_session

    async def get_or_create_active_session(
        self,
        user_id: str,
        session_id: UUID | None = None,
    ) -> ChatSessionModel:
        """
        Resolve the session a user's next message belongs to.

        Resolution order:
        1. The session ``session_id``, if it exists and belongs to the user.
           A non-ACTIVE one is reactivated.
        2. The user's most recently created ACTIVE session.
        3. A new ACTIVE session.

        At most one write happens (reactivation or insert).

        Args:
            user_id: Session owner
            session_id: Session the client last used, if any

        Returns:
            ChatSessionModel: ACTIVE session for the user
        """
        if session_id is not None:
            existing = await self.session_crud.get_for_user(self.db, session_id, user_id)
            if existing is not None:
                if existing.status == ChatSessionStatus.ACTIVE:
                    return existing

                ensure_transition(existing.status, ChatSessionStatus.ACTIVE)
                reactivated = await self.session_crud.update_by_id(
                    self.db,
                    existing.id,
                    status=ChatSessionStatus.ACTIVE,
                )
                await self.db.commit()
                await self.db.refresh(reactivated)
                log_with_context(
                    logger,
                    logging.INFO,
                    "Reactivated chat session",
                    user_id=user_id,
                    session_id=reactivated.id,
                )
                return reactivated

        latest = await self.session_crud.get_latest_active(self.db, user_id)
        if latest is not None:
            return latest

        return await self._create_session(user_id)

    async def archive_session(self, session_id: UUID) -> None:
        """
        Archive a session regardless of its current status.

        Archiving an archived or unknown session is a no-op.

        Args:
            session_id: Chat session UUID
        """
        matched = await self.session_crud.update_status_many(
            self.db,
            [session_id],
            ChatSessionStatus.ARCHIVED,
        )
        await self.db.commit()
        log_with_context(
            logger,
            logging.INFO,
            "Archived chat session",
            session_id=session_id,
            matched=matched,
        )

    async def append_message(
        self,
        session_id: UUID,
        sender: ChatMessageSender,
        content: str,
        metadata: Any = None,
    ) -> ChatMessageModel:
        """
        Persist one message under a session.

        Sender and content are stored as given.

        Args:
            session_id: Owning chat session UUID
            sender: Message author
            content: Message text
            metadata: Optional JSON annotation

        Returns:
            ChatMessageModel: Stored message with generated id and created_at
        """
        message = await self.message_crud.create_for_session(
            self.db,
            session_id=session_id,
            sender=sender,
            content=content,
            metadata=metadata,
        )
        await self.db.commit()
        await self.db.refresh(message)
        logger.debug(f"Appended {message.sender.value} message {message.id} to {session_id}")
        return message

    async def fetch_recent_messages(
        self,
        session_id: UUID,
        take: int = DEFAULT_RECENT_MESSAGES,
    ) -> list[ChatMessageModel]:
        """
        Return the ``take`` newest messages of a session, oldest first.

        Args:
            session_id: Chat session UUID
            take: Maximum number of messages

        Returns:
            list[ChatMessageModel]: Snapshot in chronological order
        """
        newest_first = await self.message_crud.get_recent(self.db, session_id, take)
        return list(reversed(newest_first))

    async def fetch_active_session_with_messages(self, user_id: str) -> ChatSessionModel:
        """
        Return the user's newest ACTIVE session with its opening messages.

        ``messages`` holds at most ACTIVE_SESSION_MESSAGE_LIMIT messages in
        chronological order. A new empty session is created when the user has
        no ACTIVE session.

        Args:
            user_id: Session owner

        Returns:
            ChatSessionModel: Session with ``messages`` loaded
        """
        chat_session = await self.session_crud.get_latest_active(self.db, user_id)
        if chat_session is None:
            chat_session = await self._create_session(user_id)
            messages: list[ChatMessageModel] = []
        else:
            messages = list(
                await self.message_crud.get_first(
                    self.db,
                    chat_session.id,
                    ACTIVE_SESSION_MESSAGE_LIMIT,
                )
            )

        # Load without marking the collection dirty; a partial list must not
        # orphan the remaining messages on the next flush.
        set_committed_value(chat_session, "messages", messages)
        return chat_session

    async def reset_session(self, user_id: str) -> ChatSessionModel:
        """
        Archive all of the user's ACTIVE sessions and start a new one.

        Old sessions keep their context and messages.

        Args:
            user_id: Session owner

        Returns:
            ChatSessionModel: The new ACTIVE session
        """
        active_ids = await self.session_crud.list_active_ids(self.db, user_id)
        if active_ids:
            await self.session_crud.update_status_many(
                self.db,
                active_ids,
                ChatSessionStatus.ARCHIVED,
            )
            await self.db.commit()
            log_with_context(
                logger,
                logging.INFO,
                "Archived active chat sessions for reset",
                user_id=user_id,
                archived=len(active_ids),
            )

        return await self._create_session(user_id)

    async def update_session_context(self, session_id: UUID, context: Any) -> None:
        """
        Replace the context of a session.

        No merge: the stored value becomes exactly ``context``. Unknown
        sessions are ignored.

        Args:
            session_id: Chat session UUID
            context: JSON-serialisable value
        """
        await self.session_crud.update_context(self.db, session_id, context)
        await self.db.commit()
