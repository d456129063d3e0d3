"""
Test suite for the chat session status state machine.

System role: Verification of status transition rules
"""

import pytest

from concierge.core.exceptions import InvalidStatusTransitionError
from concierge.core.session_status import (
    ALLOWED_TRANSITIONS,
    INITIAL_STATUS,
    ChatSessionStatus,
    can_transition,
    ensure_transition,
)


class TestChatSessionStatus:
    """Test suite for ChatSessionStatus values."""

    def test_initial_status_should_be_active(self) -> None:
        assert INITIAL_STATUS is ChatSessionStatus.ACTIVE

    def test_status_values_should_match_names(self) -> None:
        assert [status.value for status in ChatSessionStatus] == ["ACTIVE", "ARCHIVED"]

    def test_every_status_should_have_transition_entry(self) -> None:
        assert set(ALLOWED_TRANSITIONS) == set(ChatSessionStatus)


class TestCanTransition:
    """Test suite for can_transition()."""

    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (ChatSessionStatus.ACTIVE, ChatSessionStatus.ARCHIVED),
            (ChatSessionStatus.ARCHIVED, ChatSessionStatus.ACTIVE),
        ],
    )
    def test_allowed_transitions_should_return_true(self, current, target) -> None:
        assert can_transition(current, target) is True

    @pytest.mark.parametrize("status", list(ChatSessionStatus))
    def test_same_state_should_not_be_a_transition(self, status) -> None:
        assert can_transition(status, status) is False

    def test_plain_string_values_should_be_accepted(self) -> None:
        assert can_transition("ACTIVE", "ARCHIVED") is True

    def test_unknown_status_should_return_false(self) -> None:
        assert can_transition(ChatSessionStatus.ACTIVE, "CLOSED") is False


class TestEnsureTransition:
    """Test suite for ensure_transition()."""

    def test_reactivation_should_pass(self) -> None:
        ensure_transition(ChatSessionStatus.ARCHIVED, ChatSessionStatus.ACTIVE)

    def test_invalid_transition_should_raise_with_details(self) -> None:
        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            ensure_transition(ChatSessionStatus.ACTIVE, ChatSessionStatus.ACTIVE)

        assert exc_info.value.details == {"current": "ACTIVE", "target": "ACTIVE"}
        assert "ACTIVE to ACTIVE" in str(exc_info.value)
