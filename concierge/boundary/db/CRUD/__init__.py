"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from concierge.boundary.db.CRUD import chat_session_crud

    session = await chat_session_crud.get_latest_active(db, user_id)
"""

from concierge.boundary.db.CRUD.base_crud import BaseCRUD
from concierge.boundary.db.CRUD.chat_session_crud import ChatSessionCRUD, chat_session_crud
from concierge.boundary.db.CRUD.chat_message_crud import ChatMessageCRUD, chat_message_crud

__all__ = [
    "BaseCRUD",
    "ChatSessionCRUD",
    "chat_session_crud",
    "ChatMessageCRUD",
    "chat_message_crud",
]
