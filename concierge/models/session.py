"""
Chat session transcript mapping.

Converts stored chat sessions and messages to API response schemas.

Dependencies: concierge.boundary.db.models, concierge.models.chat
System role: Session API contracts
"""

from typing import Literal

from concierge.boundary.db.models import ChatMessageModel, ChatMessageSender, ChatSessionModel
from concierge.models.chat import ChatMessageResponse, ChatSessionResponse


def map_sender(sender: ChatMessageSender) -> Literal["user", "ai", "system"]:
    """Transcript author for a stored sender."""
    if sender == ChatMessageSender.AI:
        return "ai"
    if sender == ChatMessageSender.USER:
        return "user"
    return "system"


def to_message_response(message: ChatMessageModel) -> ChatMessageResponse:
    """Map a stored message to its transcript entry."""
    return ChatMessageResponse(
        id=message.id,
        author=map_sender(message.sender),
        content=message.content,
    )


def to_session_response(
    chat_session: ChatSessionModel,
    messages: list[ChatMessageModel] | None = None,
) -> ChatSessionResponse:
    """
    Build the session payload returned by the chat session endpoints.

    Args:
        chat_session: Stored chat session
        messages: Transcript to include (empty when None)

    Returns:
        ChatSessionResponse: Session id, stored context and transcript
    """
    return ChatSessionResponse(
        session_id=chat_session.id,
        summary=chat_session.context,
        messages=[to_message_response(message) for message in messages or []],
    )
