"""
Borrower profile summary and extraction.

The summary is what the assistant knows about the borrower's deal so far.
It is sent by the client on every turn and persisted as the chat session
context.

Dependencies: pydantic, re
System role: Borrower profile model and free-text extraction
"""

import math
import re
from typing import Literal

from pydantic import BaseModel, FiniteFloat

PriorityKey = Literal["rate", "ltv", "speed", "documents"]

CHAT_QUESTIONS: tuple[str, ...] = (
    "Where is the property you plan to finance? Let me know the city, state, or zip code.",
    "What timeline are you targeting for closing? Have you already signed a purchase contract?",
    "Which loan factors matter the most to you? For example: rate, loan-to-value, "
    "speed to close, or document requirements.",
)

MIN_LOAN_AMOUNT = 50_000

_PRIORITY_PATTERNS: tuple[tuple[PriorityKey, re.Pattern[str]], ...] = (
    ("rate", re.compile(r"(interest|rate|apr|pricing)", re.IGNORECASE)),
    ("ltv", re.compile(r"(ltv|max leverage|loan amount|high leverage)", re.IGNORECASE)),
    ("speed", re.compile(r"(speed|fast close|quick close|timeline|weeks|days)", re.IGNORECASE)),
    ("documents", re.compile(r"(docs|minimal|documentation|paperwork|no doc)", re.IGNORECASE)),
)

_LOCATION_RE = re.compile(r"\bin\s+([A-Za-z\s]+(?:,\s*[A-Za-z]{2})?)", re.IGNORECASE)
_ZIP_RE = re.compile(r"\b\d{5}\b")
_CREDIT_RE = re.compile(
    r"credit(?: score)?\s*(?:is|of|around|about|=)?\s*(\d{3})", re.IGNORECASE
)
_AMOUNT_RE = re.compile(r"\$?\s*([\d,.]+)\s*(k|m|million)?", re.IGNORECASE)
_TIMELINE_RE = re.compile(
    r"(next month|this month|in \d+\s*(?:weeks|months)|this quarter|next quarter"
    r"|already signed|purchase agreement)",
    re.IGNORECASE,
)

_UNIT_MULTIPLIERS = {"k": 1_000, "m": 1_000_000, "million": 1_000_000}


class BorrowerSummary(BaseModel):
    """Borrower deal profile captured during the chat."""

    location: str | None = None
    timeline: str | None = None
    priority: PriorityKey | None = None
    credit: str | None = None
    amount: FiniteFloat | None = None

    def to_context(self) -> dict:
        """Serialise for storage as session context, dropping unset fields."""
        return self.model_dump(exclude_none=True)


def determine_priority(text: str) -> PriorityKey | None:
    """Return the first loan factor mentioned in ``text``, if any."""
    for key, pattern in _PRIORITY_PATTERNS:
        if pattern.search(text):
            return key
    return None


def _parse_amount(message: str) -> float | None:
    match = _AMOUNT_RE.search(message)
    if not match:
        return None
    try:
        amount = float(match.group(1).replace(",", ""))
    except ValueError:
        return None
    unit = (match.group(2) or "").lower()
    amount *= _UNIT_MULTIPLIERS.get(unit, 1)
    if not math.isfinite(amount) or amount < MIN_LOAN_AMOUNT:
        return None
    return amount


def extract_information(message: str) -> BorrowerSummary:
    """
    Pull borrower profile fields out of a free-text message.

    Only the first number in the message is considered as a loan amount, and
    amounts under ``MIN_LOAN_AMOUNT`` are ignored.

    Args:
        message: Raw borrower message

    Returns:
        BorrowerSummary: Fields found in the message; the rest stay None
    """
    info: dict = {}

    location_match = _LOCATION_RE.search(message)
    zip_match = _ZIP_RE.search(message)
    if location_match:
        info["location"] = location_match.group(1).strip()
    elif zip_match:
        info["location"] = zip_match.group(0)

    credit_match = _CREDIT_RE.search(message)
    if credit_match:
        info["credit"] = credit_match.group(1)

    amount = _parse_amount(message)
    if amount is not None:
        info["amount"] = amount

    timeline_match = _TIMELINE_RE.search(message.lower())
    if timeline_match:
        info["timeline"] = timeline_match.group(0)

    priority = determine_priority(message)
    if priority:
        info["priority"] = priority

    return BorrowerSummary(**info)


def compute_question_pointer(summary: BorrowerSummary) -> int:
    """Index of the next discovery question given what is already known."""
    pointer = 0
    if summary.location:
        pointer = max(pointer, 1)
    if summary.timeline:
        pointer = max(pointer, 2)
    if summary.priority:
        pointer = max(pointer, 3)
    return min(pointer, len(CHAT_QUESTIONS))
