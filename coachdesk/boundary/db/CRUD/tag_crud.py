"""
Tag CRUD operations.

Dependencies: sqlalchemy, coachdesk.boundary.db.models
System role: Shared tag vocabulary lookups
"""

from typing import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.boundary.db.CRUD.base_crud import BaseCRUD
from coachdesk.boundary.db.models.tag_model import TagCategory, TagModel


class TagCRUD(BaseCRUD[TagModel]):
    """CRUD operations for TagModel."""

    def __init__(self) -> None:
        """Initialize TagCRUD with TagModel."""
        super().__init__(TagModel)

    async def get_by_names(
        self,
        session: AsyncSession,
        names: Iterable[str],
        category: TagCategory,
    ) -> Sequence[TagModel]:
        """
        Retrieve the tags of one category whose name is in names.

        Unknown names are ignored.

        Args:
            session: Async database session
            names: Tag names to look up
            category: Tag vocabulary

        Returns:
            Sequence of matching tags, ordered by name
        """
        names = list(dict.fromkeys(names))
        if not names:
            return []
        stmt = (
            select(TagModel)
            .where(TagModel.category == category, TagModel.name.in_(names))
            .order_by(TagModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_by_category(
        self,
        session: AsyncSession,
        category: TagCategory,
    ) -> Sequence[TagModel]:
        """Retrieve all tags of one category ordered by name."""
        stmt = select(TagModel).where(TagModel.category == category).order_by(TagModel.name)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_or_create(
        self,
        session: AsyncSession,
        name: str,
        category: TagCategory,
    ) -> tuple[TagModel, bool]:
        """
        Return the (name, category) tag, creating it when missing.

        Returns:
            tuple of (tag, created)
        """
        stmt = select(TagModel).where(TagModel.name == name, TagModel.category == category)
        result = await session.execute(stmt)
        tag = result.scalar_one_or_none()
        if tag is not None:
            return tag, False
        return await self.create(session, name=name, category=category), True


tag_crud = TagCRUD()
