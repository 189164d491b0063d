"""
Client note CRUD operations.

Notes carry no user_id; ownership is resolved through the parent client.

Dependencies: sqlalchemy, coachdesk.boundary.db.models
System role: Client note persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.boundary.db.CRUD.base_crud import BaseCRUD
from coachdesk.boundary.db.models.client_model import ClientModel
from coachdesk.boundary.db.models.note_model import ClientNoteModel


class NoteCRUD(BaseCRUD[ClientNoteModel]):
    """CRUD operations for ClientNoteModel."""

    def __init__(self) -> None:
        """Initialize NoteCRUD with ClientNoteModel."""
        super().__init__(ClientNoteModel)

    async def get_owned(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> ClientNoteModel | None:
        """
        Retrieve a note whose client belongs to user_id.

        Args:
            session: Async database session
            id: Note UUID
            user_id: Owning user id

        Returns:
            ClientNoteModel if found and owned, None otherwise
        """
        stmt = (
            select(ClientNoteModel)
            .join(ClientModel, ClientNoteModel.client_id == ClientModel.id)
            .where(ClientNoteModel.id == id, ClientModel.user_id == user_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_client(
        self,
        session: AsyncSession,
        client_id: UUID,
    ) -> Sequence[ClientNoteModel]:
        """Retrieve a client's notes, newest first."""
        stmt = (
            select(ClientNoteModel)
            .where(ClientNoteModel.client_id == client_id)
            .order_by(ClientNoteModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


note_crud = NoteCRUD()
