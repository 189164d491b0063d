"""
Resource CRUD operations.

Resources are global; client links are scoped through the client.

Dependencies: sqlalchemy, coachdesk.boundary.db.models
System role: Resource library and client suggestion persistence
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coachdesk.boundary.db.CRUD.base_crud import BaseCRUD
from coachdesk.boundary.db.models.client_model import ClientModel
from coachdesk.boundary.db.models.resource_model import ClientResourceModel, ResourceModel
from coachdesk.boundary.db.models.tag_model import TagModel


class ResourceCRUD(BaseCRUD[ResourceModel]):
    """CRUD operations for ResourceModel and ClientResourceModel."""

    def __init__(self) -> None:
        """Initialize ResourceCRUD with ResourceModel."""
        super().__init__(ResourceModel)

    async def find_by_title_and_type(
        self,
        session: AsyncSession,
        title: str,
        type: str,
    ) -> ResourceModel | None:
        """Retrieve the first resource with this exact title and type."""
        stmt = (
            select(ResourceModel)
            .where(ResourceModel.title == title, ResourceModel.type == type)
            .order_by(ResourceModel.created_at)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_tags(
        self,
        session: AsyncSession,
        tag: str | None = None,
    ) -> Sequence[ResourceModel]:
        """
        Retrieve the resource library ordered by title.

        Args:
            session: Async database session
            tag: Only resources carrying a tag with this name (optional)

        Returns:
            Sequence of resources with tags loaded
        """
        stmt = select(ResourceModel).options(selectinload(ResourceModel.tags))
        if tag:
            stmt = stmt.where(ResourceModel.tags.any(TagModel.name == tag))
        stmt = stmt.order_by(ResourceModel.title)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_with_tags(self, session: AsyncSession, resource_id: UUID) -> ResourceModel | None:
        """Retrieve a resource with its tags loaded."""
        stmt = (
            select(ResourceModel)
            .where(ResourceModel.id == resource_id)
            .options(selectinload(ResourceModel.tags))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def link_exists(
        self,
        session: AsyncSession,
        client_id: UUID,
        resource_id: UUID,
        session_id: UUID | None,
    ) -> bool:
        """Check whether a resource was already suggested for this client/session."""
        stmt = select(ClientResourceModel.id).where(
            ClientResourceModel.client_id == client_id,
            ClientResourceModel.resource_id == resource_id,
        )
        if session_id is None:
            stmt = stmt.where(ClientResourceModel.session_id.is_(None))
        else:
            stmt = stmt.where(ClientResourceModel.session_id == session_id)
        result = await session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def link_to_client(
        self,
        session: AsyncSession,
        client_id: UUID,
        resource_id: UUID,
        session_id: UUID | None = None,
        suggested_by: str = "coach",
    ) -> ClientResourceModel | None:
        """
        Suggest a resource to a client, skipping duplicates.

        Returns:
            Created link, None if it already existed
        """
        if await self.link_exists(session, client_id, resource_id, session_id):
            return None
        link = ClientResourceModel(
            client_id=client_id,
            resource_id=resource_id,
            session_id=session_id,
            suggested_by=suggested_by,
        )
        session.add(link)
        await session.flush()
        return link

    async def get_link(self, session: AsyncSession, link_id: UUID) -> ClientResourceModel | None:
        """Retrieve one client suggestion with its resource and tags loaded."""
        stmt = (
            select(ClientResourceModel)
            .where(ClientResourceModel.id == link_id)
            .options(selectinload(ClientResourceModel.resource).selectinload(ResourceModel.tags))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_client(
        self,
        session: AsyncSession,
        client_id: UUID,
    ) -> Sequence[ClientResourceModel]:
        """Retrieve a client's suggested resources, newest first."""
        stmt = (
            select(ClientResourceModel)
            .where(ClientResourceModel.client_id == client_id)
            .options(selectinload(ClientResourceModel.resource).selectinload(ResourceModel.tags))
            .order_by(ClientResourceModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_links_for_user(self, session: AsyncSession, user_id: str) -> int:
        """Count resources suggested to any client of user_id."""
        stmt = (
            select(func.count(ClientResourceModel.id))
            .join(ClientModel, ClientResourceModel.client_id == ClientModel.id)
            .where(ClientModel.user_id == user_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one()


resource_crud = ResourceCRUD()
