"""Chat API endpoints.

Routes:
- POST /chat - Send a borrower message and get the assistant reply
- GET /chat/session - Active chat session with its transcript
- POST /chat/session - Session actions ({"action": "reset"})

Dependencies: concierge.application.services, concierge.api.deps
System role: Borrower chat HTTP API
"""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from concierge.api.deps import (
    get_chat_service,
    get_chat_session_manager,
    get_current_user_id,
)
from concierge.application.services import ChatService, ChatSessionManager
from concierge.core.exceptions import ChatModelNotConfiguredError
from concierge.models.chat import (
    ChatRequest,
    ChatResponse,
    ChatSessionActionRequest,
    ChatSessionResponse,
)
from concierge.models.session import to_session_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    user_id: str = Depends(get_current_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Send a borrower message to the assistant.

    Args:
        request: ChatRequest with message, summary and intake pointer
        user_id: Authenticated user id
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Assistant reply, session id and summary

    Raises:
        HTTPException(500): Chat model not configured or processing error
    """
    try:
        result = await chat_service.process_turn(
            user_id=user_id,
            message=request.message,
            summary=request.summary,
            pointer=request.pointer,
            should_recap=request.should_recap,
            session_id=request.session_id,
        )
    except ChatModelNotConfiguredError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except Exception as e:
        logger.error(f"Chat turn failed for user {user_id}: {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail="Chat request failed")

    return ChatResponse(
        message=result.message,
        session_id=result.session_id,
        summary=result.summary,
    )


@router.get("/session", response_model=ChatSessionResponse)
async def get_active_session(
    user_id: str = Depends(get_current_user_id),
    manager: ChatSessionManager = Depends(get_chat_session_manager),
) -> ChatSessionResponse:
    """Return the user's active chat session, creating one if needed.

    Args:
        user_id: Authenticated user id
        manager: Injected ChatSessionManager

    Returns:
        ChatSessionResponse: Session id, stored summary and up to 50 messages
    """
    chat_session = await manager.fetch_active_session_with_messages(user_id)
    return to_session_response(chat_session, chat_session.messages)


@router.post("/session", response_model=ChatSessionResponse)
async def session_action(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    manager: ChatSessionManager = Depends(get_chat_session_manager),
) -> ChatSessionResponse:
    """Apply an action to the user's chat session.

    Only ``{"action": "reset"}`` is supported: it archives the active
    session and returns a fresh empty one.

    Args:
        request: Raw request (body parsed leniently)
        user_id: Authenticated user id
        manager: Injected ChatSessionManager

    Returns:
        ChatSessionResponse: New session with an empty transcript

    Raises:
        HTTPException(400): Missing, malformed or unsupported action
    """
    try:
        body = ChatSessionActionRequest.model_validate(await request.json())
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
        raise HTTPException(status_code=400, detail="Invalid request")

    if body.action != "reset":
        raise HTTPException(status_code=400, detail="Invalid request")

    chat_session = await manager.reset_session(user_id)
    return to_session_response(chat_session)
