"""
Chat message ORM model.

One turn in a chat session. Messages are written once and never updated.

Dependencies: sqlalchemy, concierge.boundary.db.base
System role: Message persistence for the borrower chat
"""

import enum
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Enum, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from concierge.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ChatMessageSender(str, enum.Enum):
    """
    Author of a chat message.

    USER: The borrower
    AI: The assistant
    SYSTEM: Notices inserted by the application
    """

    USER = "USER"
    AI = "AI"
    SYSTEM = "SYSTEM"


class ChatMessageModel(Base, UUIDMixin, TimestampMixin):
    """
    Chat message ORM model.

    created_at is the ordering key; the composite index on
    (session_id, created_at) serves both newest-first and oldest-first reads.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Owning ChatSessionModel id (cascade delete)
        sender: Message author
        content: Message text
        message_metadata: Optional JSON annotation (column "metadata")
        created_at: Message creation timestamp (UTC)
    """

    __tablename__ = "chat_messages"
    __table_args__ = (
        Index("ix_chat_messages_session_id_created_at", "session_id", "created_at"),
    )

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("chat_sessions.id", ondelete="CASCADE"),
        nullable=False,
    )

    sender: Mapped[ChatMessageSender] = mapped_column(
        Enum(ChatMessageSender, native_enum=False, length=16),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    message_metadata: Mapped[Any | None] = mapped_column(
        "metadata",
        JSON,
        nullable=True,
        default=None,
    )

    session = relationship("ChatSessionModel", back_populates="messages")

    def __repr__(self) -> str:
        return f"<ChatMessageModel id={self.id} session_id={self.session_id} sender={self.sender}>"
