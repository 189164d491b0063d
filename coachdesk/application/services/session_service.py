"""
Coaching session service orchestrator.

Coordinates session lifecycle and tag assignment.

Dependencies: coachdesk.boundary.db.CRUD
System role: Session use case orchestration
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services.mappers import (
    client_resource_to_dict,
    session_client_ref,
    session_summary,
    session_to_dict,
    tag_to_dict,
)
from coachdesk.boundary.db.CRUD.client_crud import client_crud
from coachdesk.boundary.db.CRUD.session_crud import session_crud
from coachdesk.boundary.db.CRUD.tag_crud import tag_crud
from coachdesk.boundary.db.models import CoachingSessionModel, TagCategory
from coachdesk.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({
    "title",
    "date",
    "transcript",
    "summary",
    "follow_up_email",
    "analysis",
    "preparation_notes",
})


def _list_item(session: CoachingSessionModel, resource_count: int) -> dict:
    data = session_summary(session)
    data.update({
        "client": session_client_ref(session),
        "tags": [tag_to_dict(t) for t in session.tags],
        "resource_count": resource_count,
    })
    return data


def detail_to_dict(session: CoachingSessionModel) -> dict:
    """Full session payload; client, tags and resources must be loaded."""
    data = session_to_dict(session)
    data.update({
        "client": session_client_ref(session),
        "tags": [tag_to_dict(t) for t in session.tags],
        "resources": [client_resource_to_dict(link) for link in session.client_resources],
    })
    return data


class SessionService:
    """Coaching session orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_detail(self, user_id: str, session_id: UUID) -> CoachingSessionModel:
        session = await session_crud.get_detail(self.db, session_id, user_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        return session

    async def list_sessions(self, user_id: str) -> list[dict]:
        """
        List the user's sessions, newest first.

        Returns:
            list[dict]: Sessions with client, tags and resource_count
        """
        rows = await session_crud.list_with_counts(self.db, user_id)
        return [_list_item(s, count) for s, count in rows]

    async def list_client_sessions(self, user_id: str, client_id: UUID) -> list[dict]:
        """
        List one client's sessions by date, latest first.

        Raises:
            NotFoundError: If the client is not owned by the user
        """
        if await client_crud.get_owned(self.db, client_id, user_id) is None:
            raise NotFoundError("Client", client_id)
        rows = await session_crud.list_with_counts(self.db, user_id, client_id=client_id)
        return [_list_item(s, count) for s, count in rows]

    async def get_session(self, user_id: str, session_id: UUID) -> dict:
        """
        Get a session with client, tags and suggested resources.

        Raises:
            NotFoundError: If the session is not owned by the user
        """
        return detail_to_dict(await self._get_detail(user_id, session_id))

    async def create_session(
        self,
        user_id: str,
        title: str,
        client_id: UUID | None,
        date: datetime | None,
        transcript: str | None = None,
    ) -> dict:
        """
        Log a coaching session for one of the user's clients.

        Raises:
            ValidationError: If title, client or date is missing
            NotFoundError: If the client is not owned by the user
        """
        title = (title or "").strip()
        if not title:
            raise ValidationError("Title is required", field="title")
        if client_id is None:
            raise ValidationError("Client is required", field="client_id")
        if date is None:
            raise ValidationError("Session date is required", field="date")
        if await client_crud.get_owned(self.db, client_id, user_id) is None:
            raise NotFoundError("Client", client_id)

        session = await session_crud.create(
            self.db,
            user_id=user_id,
            client_id=client_id,
            title=title,
            date=date,
            transcript=transcript or None,
        )
        logger.info(
            "Session created",
            extra={"user_id": user_id, "session_id": str(session.id), "client_id": str(client_id)},
        )
        return detail_to_dict(await self._get_detail(user_id, session.id))

    async def update_session(self, user_id: str, session_id: UUID, changes: dict) -> dict:
        """
        Partially update a session.

        Args:
            user_id: Current user id
            session_id: Session UUID
            changes: Only the fields to write

        Raises:
            ValidationError: If title is blanked or date cleared
            NotFoundError: If the session is not owned by the user
        """
        changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        if "title" in changes:
            changes["title"] = (changes["title"] or "").strip()
            if not changes["title"]:
                raise ValidationError("Title is required", field="title")
        if "date" in changes and changes["date"] is None:
            raise ValidationError("Session date is required", field="date")

        session = await session_crud.get_owned(self.db, session_id, user_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        await session_crud.update(self.db, session, **changes)
        logger.info(
            "Session updated",
            extra={"session_id": str(session_id), "fields": sorted(changes)},
        )
        return detail_to_dict(await self._get_detail(user_id, session_id))

    async def delete_session(self, user_id: str, session_id: UUID) -> None:
        """Delete a session with its tag and resource links."""
        session = await session_crud.get_with_tags(self.db, session_id, user_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        await session_crud.delete(self.db, session)
        logger.info("Session deleted", extra={"user_id": user_id, "session_id": str(session_id)})

    async def update_session_tags(self, user_id: str, session_id: UUID, tag_names: list[str]) -> dict:
        """
        Replace a session's tags with the known session tags among tag_names.

        Unknown names are ignored.
        """
        session = await session_crud.get_with_tags(self.db, session_id, user_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        names = [n.strip().lower() for n in tag_names if n and n.strip()]
        tags = await tag_crud.get_by_names(self.db, names, TagCategory.SESSION)
        session.tags = list(tags)
        await self.db.flush()
        logger.info(
            "Session tags updated",
            extra={"session_id": str(session_id), "tag_count": len(tags)},
        )
        return detail_to_dict(await self._get_detail(user_id, session_id))

    async def list_session_tags(self) -> list[dict]:
        """List the session tag vocabulary ordered by name."""
        tags = await tag_crud.list_by_category(self.db, TagCategory.SESSION)
        return [tag_to_dict(t) for t in tags]
