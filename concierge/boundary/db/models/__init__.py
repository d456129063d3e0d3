"""
Database models package.

Exports:
  - ChatSessionModel, ChatSessionStatus: Chat session ORM model and status enum
  - ChatMessageModel, ChatMessageSender: Chat message ORM model and sender enum

Dependencies: sqlalchemy, concierge.boundary.db.base
System role: Database model definitions for domain entities
"""

from concierge.boundary.db.models.chat_session_model import ChatSessionModel, ChatSessionStatus
from concierge.boundary.db.models.chat_message_model import ChatMessageModel, ChatMessageSender

__all__ = [
    "ChatSessionModel",
    "ChatSessionStatus",
    "ChatMessageModel",
    "ChatMessageSender",
]
