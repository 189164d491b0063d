"""
Coaching session CRUD operations.

Provides ownership-scoped session queries with eager loading of the
client, tags and suggested resources.

Dependencies: sqlalchemy, coachdesk.boundary.db.models
System role: Session persistence operations
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coachdesk.boundary.db.CRUD.base_crud import OwnedCRUD
from coachdesk.boundary.db.models.resource_model import ClientResourceModel, ResourceModel
from coachdesk.boundary.db.models.session_model import CoachingSessionModel


def _resource_count():
    return (
        select(func.count(ClientResourceModel.id))
        .where(ClientResourceModel.session_id == CoachingSessionModel.id)
        .correlate(CoachingSessionModel)
        .scalar_subquery()
    )


class SessionCRUD(OwnedCRUD[CoachingSessionModel]):
    """
    CRUD operations for CoachingSessionModel.

    Extends OwnedCRUD with list queries that carry resource counts and
    detail queries that eagerly load related rows.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with CoachingSessionModel."""
        super().__init__(CoachingSessionModel)

    async def list_with_counts(
        self,
        session: AsyncSession,
        user_id: str,
        client_id: UUID | None = None,
    ) -> list[tuple[CoachingSessionModel, int]]:
        """
        List a user's sessions with client, tags and resource count.

        Without client_id the newest sessions come first; for a single
        client the order is by session date, latest first.

        Args:
            session: Async database session
            user_id: Owning user id
            client_id: Restrict to one client (optional)

        Returns:
            list of (session, resource_count) tuples
        """
        stmt = (
            select(CoachingSessionModel, _resource_count().label("resource_count"))
            .where(CoachingSessionModel.user_id == user_id)
            .options(
                selectinload(CoachingSessionModel.client),
                selectinload(CoachingSessionModel.tags),
            )
        )
        if client_id is not None:
            stmt = stmt.where(CoachingSessionModel.client_id == client_id).order_by(
                CoachingSessionModel.date.desc()
            )
        else:
            stmt = stmt.order_by(CoachingSessionModel.created_at.desc())
        result = await session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def get_detail(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> CoachingSessionModel | None:
        """
        Retrieve an owned session with client, tags and resources loaded.

        Args:
            session: Async database session
            id: Session UUID
            user_id: Owning user id

        Returns:
            CoachingSessionModel with relationships loaded, None if not found
        """
        stmt = (
            select(CoachingSessionModel)
            .where(CoachingSessionModel.id == id, CoachingSessionModel.user_id == user_id)
            .options(
                selectinload(CoachingSessionModel.client),
                selectinload(CoachingSessionModel.tags),
                selectinload(CoachingSessionModel.client_resources)
                .selectinload(ClientResourceModel.resource)
                .selectinload(ResourceModel.tags),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_tags(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> CoachingSessionModel | None:
        """Retrieve an owned session with its tag collection loaded."""
        stmt = (
            select(CoachingSessionModel)
            .where(CoachingSessionModel.id == id, CoachingSessionModel.user_id == user_id)
            .options(
                selectinload(CoachingSessionModel.tags),
                selectinload(CoachingSessionModel.client_resources),
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def recent_for_client(
        self,
        session: AsyncSession,
        client_id: UUID,
        limit: int,
        with_transcript: bool = False,
    ) -> Sequence[CoachingSessionModel]:
        """
        Retrieve a client's latest sessions by session date.

        Args:
            session: Async database session
            client_id: Client UUID (ownership checked by caller)
            limit: Maximum number of sessions
            with_transcript: Only sessions that have a transcript

        Returns:
            Sequence of sessions, latest first
        """
        stmt = select(CoachingSessionModel).where(CoachingSessionModel.client_id == client_id)
        if with_transcript:
            stmt = stmt.where(
                CoachingSessionModel.transcript.is_not(None),
                CoachingSessionModel.transcript != "",
            )
        stmt = stmt.order_by(CoachingSessionModel.date.desc()).limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_since(
        self,
        session: AsyncSession,
        user_id: str,
        since: datetime,
    ) -> int:
        """Count a user's sessions dated on or after since."""
        stmt = select(func.count(CoachingSessionModel.id)).where(
            CoachingSessionModel.user_id == user_id,
            CoachingSessionModel.date >= since,
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def count_analyzed(self, session: AsyncSession, user_id: str) -> int:
        """Count a user's sessions that have an AI summary."""
        stmt = select(func.count(CoachingSessionModel.id)).where(
            CoachingSessionModel.user_id == user_id,
            CoachingSessionModel.summary.is_not(None),
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def list_recent(
        self,
        session: AsyncSession,
        user_id: str,
        limit: int,
    ) -> Sequence[CoachingSessionModel]:
        """Retrieve a user's latest sessions by date with their client loaded."""
        stmt = (
            select(CoachingSessionModel)
            .where(CoachingSessionModel.user_id == user_id)
            .options(selectinload(CoachingSessionModel.client))
            .order_by(CoachingSessionModel.date.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


session_crud = SessionCRUD()
