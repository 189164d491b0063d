"""
Client note service orchestrator.

Dependencies: coachdesk.boundary.db.CRUD
System role: Client note use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services.mappers import note_to_dict
from coachdesk.boundary.db.CRUD.client_crud import client_crud
from coachdesk.boundary.db.CRUD.note_crud import note_crud
from coachdesk.boundary.db.models import ClientNoteModel
from coachdesk.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _clean_content(content: str) -> str:
    content = (content or "").strip()
    if not content:
        raise ValidationError("Note content is required", field="content")
    return content


class NoteService:
    """Client note orchestrator; ownership is checked through the client."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize note service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _ensure_client(self, user_id: str, client_id: UUID) -> None:
        if await client_crud.get_owned(self.db, client_id, user_id) is None:
            raise NotFoundError("Client", client_id)

    async def _get_note(self, user_id: str, note_id: UUID) -> ClientNoteModel:
        note = await note_crud.get_owned(self.db, note_id, user_id)
        if note is None:
            raise NotFoundError("Note", note_id)
        return note

    async def list_notes(self, user_id: str, client_id: UUID) -> list[dict]:
        """List a client's notes, newest first."""
        await self._ensure_client(user_id, client_id)
        notes = await note_crud.list_for_client(self.db, client_id)
        return [note_to_dict(n) for n in notes]

    async def create_note(self, user_id: str, client_id: UUID, content: str) -> dict:
        """
        Add a note to a client.

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the client is not owned by the user
        """
        content = _clean_content(content)
        await self._ensure_client(user_id, client_id)
        note = await note_crud.create(self.db, client_id=client_id, content=content)
        logger.info("Note created", extra={"client_id": str(client_id), "note_id": str(note.id)})
        return note_to_dict(note)

    async def update_note(self, user_id: str, note_id: UUID, content: str) -> dict:
        """Rewrite a note; updated_at records the edit."""
        content = _clean_content(content)
        note = await self._get_note(user_id, note_id)
        await note_crud.update(self.db, note, content=content)
        logger.info("Note updated", extra={"note_id": str(note_id)})
        return note_to_dict(note)

    async def delete_note(self, user_id: str, note_id: UUID) -> None:
        """Delete a note."""
        note = await self._get_note(user_id, note_id)
        await note_crud.delete(self.db, note)
        logger.info("Note deleted", extra={"note_id": str(note_id)})
