"""
Client CRUD operations.

Provides ownership-scoped client queries, the client detail graph and the
symmetric team-member relation.

Dependencies: sqlalchemy, coachdesk.boundary.db.models
System role: Client persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coachdesk.boundary.db.CRUD.base_crud import OwnedCRUD
from coachdesk.boundary.db.models.client_model import ClientModel, client_team_members
from coachdesk.boundary.db.models.session_model import CoachingSessionModel


def _session_count():
    return (
        select(func.count(CoachingSessionModel.id))
        .where(CoachingSessionModel.client_id == ClientModel.id)
        .correlate(ClientModel)
        .scalar_subquery()
    )


class ClientCRUD(OwnedCRUD[ClientModel]):
    """
    CRUD operations for ClientModel.

    Extends OwnedCRUD with session counts, eager-loaded relationship
    graphs and team-member link management.
    """

    def __init__(self) -> None:
        """Initialize ClientCRUD with ClientModel."""
        super().__init__(ClientModel)

    async def list_with_session_counts(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> list[tuple[ClientModel, int]]:
        """
        List a user's clients, newest first, with their session count.

        Args:
            session: Async database session
            user_id: Owning user id

        Returns:
            list of (client, session_count) tuples
        """
        stmt = (
            select(ClientModel, _session_count().label("session_count"))
            .where(ClientModel.user_id == user_id)
            .order_by(ClientModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def get_detail(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> ClientModel | None:
        """
        Retrieve an owned client with hierarchy, team and notes loaded.

        populate_existing refreshes collections already in the identity map,
        so the result reflects mutations made earlier in the same session.

        Args:
            session: Async database session
            id: Client UUID
            user_id: Owning user id

        Returns:
            ClientModel with relationships loaded, None if not found
        """
        stmt = (
            select(ClientModel)
            .where(ClientModel.id == id, ClientModel.user_id == user_id)
            .options(
                selectinload(ClientModel.reports_to),
                selectinload(ClientModel.direct_reports),
                selectinload(ClientModel.team_members),
                selectinload(ClientModel.team_member_of),
                selectinload(ClientModel.notes),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_owned_for_delete(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> ClientModel | None:
        """
        Retrieve an owned client with every cascaded collection loaded.

        Args:
            session: Async database session
            id: Client UUID
            user_id: Owning user id

        Returns:
            ClientModel ready for session.delete(), None if not found
        """
        stmt = (
            select(ClientModel)
            .where(ClientModel.id == id, ClientModel.user_id == user_id)
            .options(
                selectinload(ClientModel.sessions).selectinload(CoachingSessionModel.tags),
                selectinload(ClientModel.sessions).selectinload(CoachingSessionModel.client_resources),
                selectinload(ClientModel.notes),
                selectinload(ClientModel.client_resources),
                selectinload(ClientModel.direct_reports),
                selectinload(ClientModel.team_members),
                selectinload(ClientModel.team_member_of),
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_sessions(self, session: AsyncSession, client_id: UUID) -> int:
        """Count sessions of one client."""
        stmt = select(func.count(CoachingSessionModel.id)).where(
            CoachingSessionModel.client_id == client_id
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def count_for_user(self, session: AsyncSession, user_id: str) -> int:
        """Count a user's clients."""
        stmt = select(func.count(ClientModel.id)).where(ClientModel.user_id == user_id)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def are_team_members(
        self,
        session: AsyncSession,
        client_id: UUID,
        member_id: UUID,
    ) -> bool:
        """
        Check whether two clients are linked, in either direction.

        Args:
            session: Async database session
            client_id: First client UUID
            member_id: Second client UUID

        Returns:
            True if a team link exists
        """
        stmt = select(func.count()).select_from(client_team_members).where(
            or_(
                and_(
                    client_team_members.c.client_id == client_id,
                    client_team_members.c.member_id == member_id,
                ),
                and_(
                    client_team_members.c.client_id == member_id,
                    client_team_members.c.member_id == client_id,
                ),
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one() > 0

    async def add_team_member(
        self,
        session: AsyncSession,
        client_id: UUID,
        member_id: UUID,
    ) -> None:
        """Insert a team link from client_id to member_id."""
        await session.execute(
            insert(client_team_members).values(client_id=client_id, member_id=member_id)
        )

    async def remove_team_member(
        self,
        session: AsyncSession,
        client_id: UUID,
        member_id: UUID,
    ) -> int:
        """
        Delete the team link between two clients, whichever side created it.

        Returns:
            int: Number of link rows removed
        """
        stmt = delete(client_team_members).where(
            or_(
                and_(
                    client_team_members.c.client_id == client_id,
                    client_team_members.c.member_id == member_id,
                ),
                and_(
                    client_team_members.c.client_id == member_id,
                    client_team_members.c.member_id == client_id,
                ),
            )
        )
        result = await session.execute(stmt)
        return result.rowcount


client_crud = ClientCRUD()
