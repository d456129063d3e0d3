"""
Shared settings for the concierge service.

Every config section inherits the `.env` loading and the process-wide
fields below; sections add their own env prefix.

Dependencies: pydantic_settings
System role: Common base for concierge configuration sections
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BaseSettings(PydanticBaseSettings):
    """Process-wide settings read from the environment or `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment stage of the chat API (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="FastAPI debug mode (tracebacks in error responses)",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v
