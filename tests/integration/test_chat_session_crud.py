"""
Test suite for ChatSessionCRUD database operations.

Runs against the in-memory SQLite database from conftest.

System role: Verification of chat session persistence layer
"""

import uuid

import pytest

from concierge.boundary.db.CRUD.chat_session_crud import ChatSessionCRUD, chat_session_crud
from concierge.boundary.db.models import ChatSessionModel, ChatSessionStatus


class TestChatSessionCRUDInit:
    """Test suite for ChatSessionCRUD initialization."""

    def test_init_should_set_model_to_chat_session_model(self) -> None:
        crud = ChatSessionCRUD()

        assert crud.model is ChatSessionModel


class TestChatSessionCRUDCreate:
    """Test suite for create()."""

    @pytest.mark.asyncio
    async def test_create_should_populate_generated_fields(self, test_async_db, user_id) -> None:
        created = await chat_session_crud.create(test_async_db, user_id=user_id)

        assert isinstance(created.id, uuid.UUID)
        assert created.created_at is not None
        assert created.status == ChatSessionStatus.ACTIVE
        assert created.context is None


class TestChatSessionCRUDLookups:
    """Test suite for owner/status lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_row_or_none(self, test_async_db, user_id) -> None:
        created = await chat_session_crud.create(test_async_db, user_id=user_id)

        assert await chat_session_crud.get_by_id(test_async_db, created.id) is created
        assert await chat_session_crud.get_by_id(test_async_db, uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_for_user_should_ignore_other_owners(
        self, test_async_db, user_id, other_user_id
    ) -> None:
        created = await chat_session_crud.create(test_async_db, user_id=user_id)

        assert await chat_session_crud.get_for_user(test_async_db, created.id, user_id) is created
        assert await chat_session_crud.get_for_user(test_async_db, created.id, other_user_id) is None

    @pytest.mark.asyncio
    async def test_get_latest_active_should_pick_newest_active(self, test_async_db, user_id, at) -> None:
        await chat_session_crud.create(test_async_db, user_id=user_id, created_at=at(0))
        newest_active = await chat_session_crud.create(
            test_async_db, user_id=user_id, created_at=at(10)
        )
        await chat_session_crud.create(
            test_async_db,
            user_id=user_id,
            status=ChatSessionStatus.ARCHIVED,
            created_at=at(20),
        )

        latest = await chat_session_crud.get_latest_active(test_async_db, user_id)

        assert latest.id == newest_active.id

    @pytest.mark.asyncio
    async def test_get_latest_active_should_return_none_without_sessions(
        self, test_async_db, user_id
    ) -> None:
        assert await chat_session_crud.get_latest_active(test_async_db, user_id) is None

    @pytest.mark.asyncio
    async def test_list_active_ids_should_only_list_active_sessions_of_user(
        self, test_async_db, user_id, other_user_id
    ) -> None:
        first = await chat_session_crud.create(test_async_db, user_id=user_id)
        second = await chat_session_crud.create(test_async_db, user_id=user_id)
        await chat_session_crud.create(
            test_async_db, user_id=user_id, status=ChatSessionStatus.ARCHIVED
        )
        await chat_session_crud.create(test_async_db, user_id=other_user_id)

        ids = await chat_session_crud.list_active_ids(test_async_db, user_id)

        assert set(ids) == {first.id, second.id}


class TestChatSessionCRUDUpdates:
    """Test suite for status and context updates."""

    @pytest.mark.asyncio
    async def test_update_status_many_should_update_all_ids(self, test_async_db, user_id) -> None:
        first = await chat_session_crud.create(test_async_db, user_id=user_id)
        second = await chat_session_crud.create(test_async_db, user_id=user_id)

        matched = await chat_session_crud.update_status_many(
            test_async_db, [first.id, second.id], ChatSessionStatus.ARCHIVED
        )
        await test_async_db.refresh(first)
        await test_async_db.refresh(second)

        assert matched == 2
        assert first.status == ChatSessionStatus.ARCHIVED
        assert second.status == ChatSessionStatus.ARCHIVED

    @pytest.mark.asyncio
    async def test_update_status_many_with_no_ids_should_do_nothing(self, test_async_db) -> None:
        assert await chat_session_crud.update_status_many(
            test_async_db, [], ChatSessionStatus.ARCHIVED
        ) == 0

    @pytest.mark.asyncio
    async def test_update_context_should_replace_value(self, test_async_db, user_id) -> None:
        created = await chat_session_crud.create(
            test_async_db, user_id=user_id, context={"step": 1, "location": "Miami"}
        )

        matched = await chat_session_crud.update_context(test_async_db, created.id, {"step": 2})
        await test_async_db.refresh(created)

        assert matched == 1
        assert created.context == {"step": 2}

    @pytest.mark.asyncio
    async def test_update_context_for_unknown_session_should_match_nothing(
        self, test_async_db, session_id
    ) -> None:
        assert await chat_session_crud.update_context(test_async_db, session_id, {"a": 1}) == 0

    @pytest.mark.asyncio
    async def test_update_by_id_should_return_updated_row(self, test_async_db, user_id) -> None:
        created = await chat_session_crud.create(
            test_async_db, user_id=user_id, status=ChatSessionStatus.ARCHIVED
        )

        updated = await chat_session_crud.update_by_id(
            test_async_db, created.id, status=ChatSessionStatus.ACTIVE
        )

        assert updated.id == created.id
        assert updated.status == ChatSessionStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_update_by_id_should_return_none_when_missing(self, test_async_db, session_id) -> None:
        assert await chat_session_crud.update_by_id(
            test_async_db, session_id, status=ChatSessionStatus.ACTIVE
        ) is None
