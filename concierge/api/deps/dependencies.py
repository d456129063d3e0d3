"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, concierge.configs, concierge.application, concierge.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, Header, HTTPException
from langchain_core.language_models.chat_models import BaseChatModel
from sqlalchemy.ext.asyncio import AsyncSession

from concierge.application.services import ChatService, ChatSessionManager
from concierge.boundary.db import get_async_db
from concierge.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._chat_model: BaseChatModel | None = None
        self._chat_model_loaded = False

    @property
    def chat_model(self) -> BaseChatModel | None:
        """Get cached chat model (None when no API key is configured)."""
        if not self._chat_model_loaded:
            from concierge.boundary.llm import build_chat_model

            self._chat_model = build_chat_model(get_settings().chat)
            self._chat_model_loaded = True
        return self._chat_model

    def clear(self) -> None:
        """Clear all cached instances."""
        self._chat_model = None
        self._chat_model_loaded = False


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """
    Read the authenticated user id set by the upstream auth layer.

    Args:
        x_user_id: Value of the X-User-Id header

    Returns:
        str: User id

    Raises:
        HTTPException(401): Header missing or blank
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Unauthorized")
    return x_user_id.strip()


def get_chat_session_manager(
    db: AsyncSession = Depends(get_async_db),
) -> ChatSessionManager:
    """
    Get chat session manager instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ChatSessionManager: Manager bound to the request session
    """
    return ChatSessionManager(db=db)


def get_chat_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> ChatService:
    """
    Get chat service instance with the cached chat model.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        ChatService: Chat service for one request
    """
    cache = get_service_cache()
    return ChatService(
        db=db,
        chat_model=cache.chat_model,
        recent_window=settings.chat.recent_window,
    )
