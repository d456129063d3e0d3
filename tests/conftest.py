"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, session manager, id fixtures
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from concierge.boundary.db.base import Base
    import concierge.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_manager(test_async_db):
    """ChatSessionManager bound to the in-memory database."""
    from concierge.application.services.chat_session_manager import ChatSessionManager

    return ChatSessionManager(test_async_db)


@pytest.fixture
def user_id() -> str:
    """Generate a test user ID."""
    return f"user_{uuid.uuid4().hex[:12]}"


@pytest.fixture
def other_user_id() -> str:
    """Generate a second, unrelated user ID."""
    return f"user_{uuid.uuid4().hex[:12]}"


@pytest.fixture
def session_id() -> uuid.UUID:
    """Generate a test session ID."""
    return uuid.uuid4()


@pytest.fixture
def base_time() -> datetime:
    """Fixed reference time for rows created with explicit timestamps."""
    return datetime(2025, 10, 12, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def at(base_time: datetime):
    """Return a helper producing base_time + N seconds."""

    def _at(seconds: int) -> datetime:
        return base_time + timedelta(seconds=seconds)

    return _at
