"""
Chat service for the borrower assistant.

Runs one conversational turn: resolve the active session, store the user
message, ask the LLM with recent history and the borrower summary, store the
reply and persist the summary as session context. When the LLM fails or
answers with nothing, a deterministic intake reply is used instead so the
borrower always gets an answer.

Dependencies: langchain_core, concierge.application.services.chat_session_manager,
concierge.core.intake
System role: Chat service orchestration layer
"""

import logging
from uuid import UUID

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from concierge.application.services.chat_session_manager import ChatSessionManager
from concierge.boundary.db.models import ChatMessageModel, ChatMessageSender
from concierge.core.exceptions import ChatModelNotConfiguredError
from concierge.core.intake import BorrowerSummary, build_fallback_response, build_system_prompt
from concierge.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

DEFAULT_RECENT_WINDOW = 12


class ChatTurnResult(BaseModel):
    """Outcome of one chat turn."""

    message: str
    session_id: UUID
    summary: BorrowerSummary
    used_fallback: bool = False


def to_langchain_message(message: ChatMessageModel) -> BaseMessage:
    """Map a stored message to the LLM message type for its sender."""
    if message.sender == ChatMessageSender.AI:
        return AIMessage(content=message.content)
    if message.sender == ChatMessageSender.USER:
        return HumanMessage(content=message.content)
    return SystemMessage(content=message.content)


def _response_text(response: BaseMessage) -> str:
    content = response.content
    if isinstance(content, str):
        return content.strip()
    # Multi-part content: keep the text blocks only
    parts = [
        part if isinstance(part, str) else part.get("text", "")
        for part in content
        if isinstance(part, str) or (isinstance(part, dict) and part.get("type") == "text")
    ]
    return "".join(parts).strip()


class ChatService:
    """
    Chat service for borrower conversations.

    Session bookkeeping goes through ChatSessionManager; the LLM is an
    injected langchain chat model.
    """

    def __init__(
        self,
        db: AsyncSession,
        chat_model: BaseChatModel | None,
        recent_window: int = DEFAULT_RECENT_WINDOW,
        session_manager: ChatSessionManager | None = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for database operations
            chat_model: LLM used for replies; None disables chat turns
            recent_window: Number of recent messages sent as history
            session_manager: Session manager override (defaults to one over db)
        """
        self.db = db
        self.chat_model = chat_model
        self.recent_window = recent_window
        self.session_manager = session_manager or ChatSessionManager(db)

    async def _generate_reply(self, messages: list[BaseMessage], session_id: UUID) -> str:
        try:
            response = await self.chat_model.ainvoke(messages)
        except Exception as e:
            log_exception_with_context(
                logger,
                "Chat model call failed, using fallback reply",
                e,
                session_id=session_id,
            )
            return ""
        return _response_text(response)

    async def process_turn(
        self,
        user_id: str,
        message: str,
        summary: BorrowerSummary | None = None,
        pointer: int = 0,
        should_recap: bool = False,
        session_id: UUID | None = None,
    ) -> ChatTurnResult:
        """
        Process one borrower message.

        Flow:
        1. Resolve the active session (reactivating ``session_id`` if given)
        2. Store the user message
        3. Fetch recent history including that message
        4. Ask the chat model with the intake system prompt
        5. Fall back to the scripted reply if the model gave nothing
        6. Store the reply and replace the session context with the summary

        Args:
            user_id: Authenticated user id
            message: Borrower message (already validated as non-empty)
            summary: Borrower profile known by the client
            pointer: Index of the next discovery question
            should_recap: Whether the reply must include a recap
            session_id: Session the client last used, if any

        Returns:
            ChatTurnResult: Reply text, session id and the stored summary

        Raises:
            ChatModelNotConfiguredError: If no chat model is available
        """
        if self.chat_model is None:
            raise ChatModelNotConfiguredError({"user_id": user_id})

        summary = summary or BorrowerSummary()

        chat_session = await self.session_manager.get_or_create_active_session(
            user_id, session_id
        )
        await self.session_manager.append_message(
            chat_session.id, ChatMessageSender.USER, message
        )

        history = await self.session_manager.fetch_recent_messages(
            chat_session.id, self.recent_window
        )
        prompt_messages: list[BaseMessage] = [
            SystemMessage(content=build_system_prompt(summary, pointer, should_recap)),
            *(to_langchain_message(item) for item in history),
        ]

        reply = await self._generate_reply(prompt_messages, chat_session.id)
        used_fallback = not reply
        if used_fallback:
            reply = build_fallback_response(summary, pointer, should_recap)

        await self.session_manager.append_message(
            chat_session.id, ChatMessageSender.AI, reply
        )
        await self.session_manager.update_session_context(
            chat_session.id, summary.to_context()
        )

        logger.info(
            f"Chat turn done session_id={chat_session.id} "
            f"history={len(history)} fallback={used_fallback}"
        )
        return ChatTurnResult(
            message=reply,
            session_id=chat_session.id,
            summary=summary,
            used_fallback=used_fallback,
        )
