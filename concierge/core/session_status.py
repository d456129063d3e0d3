"""
Chat session status state machine.

Sessions start ACTIVE and are archived when the user resets the
conversation. An archived session comes back only when a caller asks for it
by id.

Dependencies: concierge.core.exceptions
System role: Status transition rules for chat sessions
"""

import enum

from concierge.core.exceptions import InvalidStatusTransitionError


class ChatSessionStatus(str, enum.Enum):
    """
    Lifecycle states of a chat session.

    ACTIVE: Receiving new messages; at most one per user is intended
    ARCHIVED: Kept for history, hidden from "active" lookups
    """

    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"


INITIAL_STATUS = ChatSessionStatus.ACTIVE

ALLOWED_TRANSITIONS: dict[ChatSessionStatus, frozenset[ChatSessionStatus]] = {
    ChatSessionStatus.ACTIVE: frozenset({ChatSessionStatus.ARCHIVED}),
    ChatSessionStatus.ARCHIVED: frozenset({ChatSessionStatus.ACTIVE}),
}


def can_transition(current: ChatSessionStatus, target: ChatSessionStatus) -> bool:
    """
    Check whether a session may move from ``current`` to ``target``.

    A same-state move is not a transition and returns False.

    Args:
        current: Status the session is in
        target: Requested status

    Returns:
        bool: True if the transition is in the allowed table
    """
    try:
        current = ChatSessionStatus(current)
        target = ChatSessionStatus(target)
    except ValueError:
        return False
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def ensure_transition(current: ChatSessionStatus, target: ChatSessionStatus) -> None:
    """
    Validate a status transition.

    Args:
        current: Status the session is in
        target: Requested status

    Raises:
        InvalidStatusTransitionError: If the transition is not allowed
    """
    if not can_transition(current, target):
        raise InvalidStatusTransitionError(current, target)
