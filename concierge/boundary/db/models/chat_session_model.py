"""
Chat session ORM model.

A bounded conversational thread between one user and the assistant.

Dependencies: sqlalchemy, concierge.boundary.db.base, concierge.core.session_status
System role: Session persistence for the borrower chat
"""

from typing import Any

from sqlalchemy import JSON, Enum, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from concierge.boundary.db.base import Base, TimestampMixin, UUIDMixin
from concierge.core.session_status import INITIAL_STATUS, ChatSessionStatus


class ChatSessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Chat session ORM model.

    Uniqueness of the ACTIVE session per user is not enforced here; the
    session manager archives older sessions instead.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owner reference (opaque, not owned by the session)
        status: ACTIVE or ARCHIVED
        context: Schema-less JSON state (borrower summary), replaced wholesale
        messages: ChatMessageModel rows owned by this session (cascade delete)
        created_at: Session creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "chat_sessions"
    __table_args__ = (
        Index("ix_chat_sessions_user_id_created_at", "user_id", "created_at"),
    )

    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Owning user identifier",
    )

    status: Mapped[ChatSessionStatus] = mapped_column(
        Enum(ChatSessionStatus, native_enum=False, length=16),
        nullable=False,
        default=INITIAL_STATUS,
    )

    context: Mapped[Any | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
        doc="Opaque conversation state",
    )

    # Relationships
    messages = relationship(
        "ChatMessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ChatMessageModel.created_at",
    )

    def __repr__(self) -> str:
        return f"<ChatSessionModel id={self.id} user_id={self.user_id} status={self.status}>"
