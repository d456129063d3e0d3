"""
Assistant prompts and offline replies for borrower intake.

Builds the system prompt sent to the LLM on each turn and the deterministic
reply used when the LLM is unavailable.

Dependencies: concierge.core.intake.summary
System role: Prompt construction for the chat assistant
"""

from decimal import ROUND_HALF_UP, Decimal

from concierge.core.intake.summary import CHAT_QUESTIONS, BorrowerSummary, PriorityKey

_PRIORITY_LABELS: dict[str, str] = {
    "rate": "Locking the lowest rate",
    "ltv": "Maximising leverage",
    "speed": "Fastest time-to-close",
    "documents": "Streamlined documentation",
}


def priority_label(key: PriorityKey) -> str:
    """Human-readable label for a loan priority."""
    return _PRIORITY_LABELS.get(key, "Balanced factors")


def format_amount(amount: float) -> str:
    """Format a loan amount as whole US dollars, e.g. ``$750,000``; halves round up."""
    whole = Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP)
    return f"${whole:,.0f}"


def build_recap(summary: BorrowerSummary, already_recapped: bool) -> str:
    """
    Summarise the captured borrower profile in one sentence.

    Args:
        summary: Current borrower profile
        already_recapped: Whether a recap was already given this conversation

    Returns:
        str: Recap sentence
    """
    if already_recapped:
        return (
            "Thanks for the update. Your borrower file is refreshed and synced "
            "with the recommendation engine."
        )

    parts: list[str] = []
    if summary.location:
        parts.append(f"Location: {summary.location}")
    if summary.amount:
        parts.append(f"Target loan: {format_amount(summary.amount)}")
    if summary.credit:
        parts.append(f"Credit score: {summary.credit}")
    if summary.priority:
        parts.append(f"Priority: {priority_label(summary.priority)}")
    if summary.timeline:
        parts.append(f"Timeline: {summary.timeline}")

    if not parts:
        return "I captured that. Keep sharing the details that matter and I'll refine the matches."
    return f"Here is your current deal profile - {' / '.join(parts)}."


def build_system_prompt(summary: BorrowerSummary, pointer: int, should_recap: bool) -> str:
    """
    Build the system prompt for one assistant turn.

    Args:
        summary: Current borrower profile
        pointer: Index of the next discovery question
        should_recap: Whether the reply must end with a recap

    Returns:
        str: System prompt text
    """
    pending_question = CHAT_QUESTIONS[pointer] if pointer < len(CHAT_QUESTIONS) else None

    segments = [
        f"Location: {summary.location}" if summary.location else None,
        f"Loan amount: {format_amount(summary.amount)}" if summary.amount else None,
        f"Credit score: {summary.credit}" if summary.credit else None,
        f"Priority: {priority_label(summary.priority)}" if summary.priority else None,
        f"Timeline: {summary.timeline}" if summary.timeline else None,
    ]
    segments = [segment for segment in segments if segment]

    lines = [
        "You are Golden Bridge AI, an elite mortgage concierge for borrowers in the United States.",
        "Your job is to maintain a concise, forward-looking conversation, capture lending "
        "requirements, and prepare borrowers for broker hand-off.",
        "Use a professional yet encouraging tone. Keep replies under 110 words.",
        f"Current borrower profile: {' | '.join(segments)}."
        if segments
        else "No borrower profile captured yet.",
        f"You must ask the following question next to continue onboarding: {pending_question}"
        if pending_question
        else "All required discovery questions have been captured. Provide a recap and invite "
        "the borrower to review the recommended matches below, highlighting that they can "
        "refresh if needed.",
        "Deliver a crisp recap before closing your message. Mention that recommendations on "
        "the page are now updated."
        if should_recap
        else "Acknowledge the latest borrower input before asking the next required question.",
    ]
    return " ".join(lines)


def build_fallback_response(summary: BorrowerSummary, pointer: int, should_recap: bool) -> str:
    """Deterministic reply used when the LLM fails or returns nothing."""
    if should_recap or pointer >= len(CHAT_QUESTIONS):
        return (
            f"{build_recap(summary, False)} Review the three highlighted loan scenarios "
            "below and let me know which one aligns best."
        )
    return f"Thanks for sharing! {CHAT_QUESTIONS[pointer]}"
