"""
Borrower intake logic.

Discovery questions, borrower profile extraction and the prompts/replies the
chat assistant uses while onboarding a borrower.
"""

from concierge.core.intake.prompts import (
    build_fallback_response,
    build_recap,
    build_system_prompt,
    format_amount,
    priority_label,
)
from concierge.core.intake.summary import (
    CHAT_QUESTIONS,
    BorrowerSummary,
    PriorityKey,
    compute_question_pointer,
    determine_priority,
    extract_information,
)

__all__ = [
    "CHAT_QUESTIONS",
    "BorrowerSummary",
    "PriorityKey",
    "build_fallback_response",
    "build_recap",
    "build_system_prompt",
    "compute_question_pointer",
    "determine_priority",
    "extract_information",
    "format_amount",
    "priority_label",
]
