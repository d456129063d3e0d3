"""
Base CRUD operations for SQLAlchemy models.

Generic find/create/update operations keyed by primary key or by filter
predicates, inherited by model-specific CRUD classes. Methods flush but
never commit; transaction boundaries belong to the caller.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from concierge.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs: Any) -> ModelT:
        """
        Insert a new record.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_first(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] = (),
    ) -> ModelT | None:
        """
        Retrieve the first record matching all criteria.

        Args:
            session: Async database session
            *criteria: SQL filter expressions, combined with AND
            order_by: Ordering applied before taking the first row

        Returns:
            First matching model instance, None if nothing matches
        """
        stmt = select(self.model).where(*criteria).order_by(*order_by).limit(1)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def find_many(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] = (),
        limit: int | None = None,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records matching the criteria, in the given order.

        Args:
            session: Async database session
            *criteria: SQL filter expressions, combined with AND
            order_by: Ordering expressions
            limit: Maximum number of records to return (None for all)

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).where(*criteria).order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **kwargs: Any,
    ) -> ModelT | None:
        """
        Update a record by primary key.

        Args:
            session: Async database session
            id: UUID primary key
            **kwargs: Fields to update with new values

        Returns:
            Updated model instance if found, None otherwise
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**kwargs)
            .returning(self.model)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_many(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        **kwargs: Any,
    ) -> int:
        """
        Update every record matching the criteria in one statement.

        Args:
            session: Async database session
            *criteria: SQL filter expressions, combined with AND
            **kwargs: Fields to update with new values

        Returns:
            Number of rows matched
        """
        stmt = update(self.model).where(*criteria).values(**kwargs)
        result = await session.execute(stmt)
        return result.rowcount
