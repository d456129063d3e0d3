"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, concierge.configs
System role: Database schema initialization

Usage:
    python -m concierge.boundary.db.create_tables
    python -m concierge.boundary.db.create_tables --drop
"""

import asyncio
import logging
import sys

from concierge.boundary.db.base import Base
from concierge.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from concierge.boundary.db.models import ChatMessageModel, ChatSessionModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables are left unchanged.

    Raises:
        SQLAlchemyError: If the connection or DDL fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Created tables: %s", ", ".join(Base.metadata.tables))


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Dropped all tables")


if __name__ == "__main__":
    from concierge.observability import configure_logging

    configure_logging()
    if "--drop" in sys.argv:
        asyncio.run(drop_all_tables())
    else:
        asyncio.run(create_all_tables())
