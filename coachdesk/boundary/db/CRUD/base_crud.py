"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes, plus the
ownership-scoped variants used for every per-user table.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Subclasses specify the model class and extend these methods with
    model-specific queries.

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

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

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

    async def get_by_id(self, session: AsyncSession, id: UUID | str) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Primary key

        Returns:
            Model instance if found, None otherwise
        """
        return await session.get(self.model, id)

    async def update(self, session: AsyncSession, instance: ModelT, **kwargs: Any) -> ModelT:
        """
        Apply field changes to a loaded instance and flush them.

        Args:
            session: Async database session
            instance: Persistent model instance
            **kwargs: Fields to update with new values

        Returns:
            The updated instance
        """
        for field, value in kwargs.items():
            setattr(instance, field, value)
        await session.flush()
        return instance

    async def delete(self, session: AsyncSession, instance: ModelT) -> None:
        """
        Delete a loaded instance, applying ORM cascades.

        Args:
            session: Async database session
            instance: Persistent model instance
        """
        await session.delete(instance)
        await session.flush()

    async def exists(self, session: AsyncSession, id: UUID | str) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Async database session
            id: Primary key

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None


class OwnedCRUD(BaseCRUD[ModelT]):
    """
    CRUD for models carrying a user_id column.

    Lookups return None for rows owned by someone else, so callers cannot
    tell "missing" from "not yours".
    """

    async def get_owned(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> ModelT | None:
        """
        Retrieve a record by primary key if it belongs to user_id.

        Args:
            session: Async database session
            id: Primary key
            user_id: Owning user id

        Returns:
            Model instance if found and owned, None otherwise
        """
        stmt = select(self.model).where(
            self.model.id == id,
            self.model.user_id == user_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_owned(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records of one user, newest first.

        Args:
            session: Async database session
            user_id: Owning user id

        Returns:
            Sequence of model instances
        """
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()
