"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_chat_session_manager,
    get_current_user_id,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_chat_service",
    "get_chat_session_manager",
    "get_current_user_id",
    "get_service_cache",
    "get_settings_dependency",
]
