"""Service orchestrators."""

from .chat_service import ChatService, ChatTurnResult
from .chat_session_manager import ChatSessionManager

__all__ = [
    "ChatService",
    "ChatSessionManager",
    "ChatTurnResult",
]
