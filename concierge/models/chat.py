"""
Chat domain models and schemas.

Request/response schemas for the chat and chat session endpoints.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from concierge.core.intake import BorrowerSummary


class ChatRequest(BaseModel):
    """Request schema for one chat turn."""

    session_id: uuid.UUID | None = Field(default=None, description="Session the client last used")
    message: str = Field(min_length=1, description="Borrower message")
    summary: BorrowerSummary = Field(
        default_factory=BorrowerSummary,
        description="Borrower profile captured so far",
    )
    pointer: int = Field(default=0, ge=0, description="Index of the next discovery question")
    should_recap: bool = Field(default=False, description="Ask the assistant for a recap")

    @field_validator("session_id", mode="before")
    @classmethod
    def _lenient_session_id(cls, v):
        # Stale or malformed ids fall back to the newest active session
        if isinstance(v, uuid.UUID):
            return v
        if not isinstance(v, str):
            return None
        try:
            return uuid.UUID(v)
        except ValueError:
            return None


class ChatResponse(BaseModel):
    """Response schema for one chat turn."""

    message: str
    session_id: uuid.UUID
    summary: BorrowerSummary


class ChatMessageResponse(BaseModel):
    """Single chat message in a session transcript."""

    id: uuid.UUID
    author: Literal["user", "ai", "system"] = Field(description="Message author")
    content: str


class ChatSessionResponse(BaseModel):
    """Active chat session with its transcript."""

    session_id: uuid.UUID
    summary: Any = Field(default=None, description="Stored session context")
    messages: list[ChatMessageResponse]


class ChatSessionActionRequest(BaseModel):
    """Request schema for chat session actions."""

    action: str | None = None
