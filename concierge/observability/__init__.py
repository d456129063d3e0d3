"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from concierge.observability.logger import configure_logging
from concierge.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)

__all__ = [
    "configure_logging",
    "log_exception_with_context",
    "log_with_context",
    "safe_log_value",
]
