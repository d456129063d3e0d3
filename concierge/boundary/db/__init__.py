"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ChatSessionModel, ChatMessageModel: Chat domain entities
  - ChatSessionStatus, ChatMessageSender: Enum types
  - chat_session_crud, chat_message_crud: CRUD operation singletons

Dependencies: sqlalchemy, concierge.configs
System role: Database adapter providing persistent storage for chat sessions
and their messages.
"""

from concierge.boundary.db.base import Base, TimestampMixin, UUIDMixin
from concierge.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from concierge.boundary.db.models import (
    ChatMessageModel,
    ChatMessageSender,
    ChatSessionModel,
    ChatSessionStatus,
)
from concierge.boundary.db.CRUD import (
    BaseCRUD,
    ChatMessageCRUD,
    ChatSessionCRUD,
    chat_message_crud,
    chat_session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ChatSessionModel",
    "ChatSessionStatus",
    "ChatMessageModel",
    "ChatMessageSender",
    # CRUD classes
    "BaseCRUD",
    "ChatSessionCRUD",
    "ChatMessageCRUD",
    # CRUD singletons
    "chat_session_crud",
    "chat_message_crud",
]
