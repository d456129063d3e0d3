"""
Test suite for ChatMessageCRUD database operations.

System role: Verification of chat message persistence layer
"""

import pytest

from concierge.boundary.db.CRUD.chat_message_crud import chat_message_crud
from concierge.boundary.db.CRUD.chat_session_crud import chat_session_crud
from concierge.boundary.db.models import ChatMessageModel, ChatMessageSender


@pytest.fixture
async def chat_session(test_async_db, user_id):
    """Persisted chat session to attach messages to."""
    return await chat_session_crud.create(test_async_db, user_id=user_id)


@pytest.fixture
async def ordered_messages(test_async_db, chat_session, at) -> list[ChatMessageModel]:
    """Five messages with increasing created_at, inserted out of order."""
    messages = {}
    for index in (3, 0, 4, 1, 2):
        messages[index] = await chat_message_crud.create(
            test_async_db,
            session_id=chat_session.id,
            sender=ChatMessageSender.USER if index % 2 == 0 else ChatMessageSender.AI,
            content=f"message {index}",
            created_at=at(index),
        )
    return [messages[index] for index in range(5)]


class TestChatMessageCRUDCreate:
    """Test suite for create_for_session()."""

    @pytest.mark.asyncio
    async def test_create_for_session_should_store_fields(self, test_async_db, chat_session) -> None:
        message = await chat_message_crud.create_for_session(
            test_async_db,
            session_id=chat_session.id,
            sender=ChatMessageSender.AI,
            content="Welcome!",
            metadata={"model": "fake"},
        )

        assert message.id is not None
        assert message.session_id == chat_session.id
        assert message.sender == ChatMessageSender.AI
        assert message.content == "Welcome!"
        assert message.message_metadata == {"model": "fake"}
        assert message.created_at is not None

    @pytest.mark.asyncio
    async def test_metadata_should_default_to_none(self, test_async_db, chat_session) -> None:
        message = await chat_message_crud.create_for_session(
            test_async_db, chat_session.id, ChatMessageSender.USER, "hi"
        )

        assert message.message_metadata is None


class TestChatMessageCRUDWindows:
    """Test suite for get_recent() and get_first()."""

    @pytest.mark.asyncio
    async def test_get_recent_should_return_newest_first(
        self, test_async_db, chat_session, ordered_messages
    ) -> None:
        recent = await chat_message_crud.get_recent(test_async_db, chat_session.id, 3)

        assert [m.content for m in recent] == ["message 4", "message 3", "message 2"]

    @pytest.mark.asyncio
    async def test_get_first_should_return_oldest_first(
        self, test_async_db, chat_session, ordered_messages
    ) -> None:
        first = await chat_message_crud.get_first(test_async_db, chat_session.id, 2)

        assert [m.content for m in first] == ["message 0", "message 1"]

    @pytest.mark.asyncio
    async def test_windows_should_be_scoped_to_session(
        self, test_async_db, chat_session, ordered_messages, user_id
    ) -> None:
        other = await chat_session_crud.create(test_async_db, user_id=user_id)

        assert await chat_message_crud.get_recent(test_async_db, other.id, 10) == []
