"""
Chat assistant configuration settings.

Settings for the LLM behind the borrower chat and the history window
sent with every turn.

Dependencies: pydantic_settings
System role: Chat model configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from concierge.configs.base import BaseSettings


class ChatSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_",
        case_sensitive=False,
        extra="ignore",
    )

    google_api_key: str | None = Field(
        default=None,
        description="Google Generative AI key; chat is disabled without it",
    )
    model_id: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model identifier",
    )
    temperature: float = Field(default=0.5, description="Sampling temperature")
    max_output_tokens: int = Field(default=600, description="Reply length cap in tokens")
    recent_window: int = Field(
        default=12,
        description="Number of recent messages sent to the model as history",
    )
