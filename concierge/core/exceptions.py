"""
Exception hierarchy for the concierge application.

Storage faults are not wrapped: SQLAlchemy errors propagate unchanged to the
caller. The classes here cover domain rule violations and missing
configuration only.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ConciergeException(Exception):
    """Base exception for all concierge application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidStatusTransitionError(ConciergeException):
    """Raised when a chat session status change is not allowed."""

    def __init__(
        self,
        current: Any,
        target: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid transition error.

        Args:
            current: Status the session is in
            target: Status that was requested
            details: Additional context
        """
        details = details or {}
        details["current"] = getattr(current, "value", current)
        details["target"] = getattr(target, "value", target)
        super().__init__(
            f"Cannot move chat session from {details['current']} to {details['target']}",
            details,
        )


class ChatModelNotConfiguredError(ConciergeException):
    """Raised when a chat turn is requested but no LLM credentials are set."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Chat model is not configured.", details)
