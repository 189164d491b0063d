"""
Client service orchestrator.

Coordinates client lifecycle, organizational hierarchy and team links.
Every operation is scoped to the calling user.

Dependencies: coachdesk.boundary.db.CRUD, email_validator
System role: Client use case orchestration
"""

import logging
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services.mappers import (
    client_ref,
    client_resource_to_dict,
    client_to_dict,
    note_to_dict,
    session_summary,
)
from coachdesk.boundary.db.CRUD.client_crud import client_crud
from coachdesk.boundary.db.CRUD.resource_crud import resource_crud
from coachdesk.boundary.db.CRUD.session_crud import session_crud
from coachdesk.boundary.db.models import ClientModel
from coachdesk.core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

RECENT_SESSIONS_LIMIT = 10

OPTIONAL_TEXT_FIELDS = (
    "role",
    "company",
    "email",
    "phone",
    "career_goal",
    "key_challenge",
    "key_stakeholders",
)


class ClientService:
    """Client service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize client service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_owned(self, client_id: UUID, user_id: str) -> ClientModel:
        client = await client_crud.get_owned(self.db, client_id, user_id)
        if client is None:
            raise NotFoundError("Client", client_id)
        return client

    async def _clean_fields(
        self,
        user_id: str,
        data: dict,
        client_id: UUID | None = None,
    ) -> dict:
        """
        Validate and normalize client form data.

        Blank optional strings become None. reports_to must be another
        client of the same user.
        """
        name = (data.get("name") or "").strip()
        if not name:
            raise ValidationError("Name is required", field="name")

        cleaned: dict = {"name": name}
        for field in OPTIONAL_TEXT_FIELDS:
            value = data.get(field)
            if isinstance(value, str):
                value = value.strip() or None
            cleaned[field] = value

        if cleaned["email"]:
            try:
                validate_email(cleaned["email"], check_deliverability=False)
            except EmailNotValidError as e:
                raise ValidationError("Invalid email address", field="email") from e

        cleaned["birthday"] = data.get("birthday")
        cleaned["coaching_since"] = data.get("coaching_since")

        reports_to_id = data.get("reports_to_id")
        if reports_to_id is not None:
            if client_id is not None and reports_to_id == client_id:
                raise ValidationError("A client cannot report to themselves", field="reports_to_id")
            if await client_crud.get_owned(self.db, reports_to_id, user_id) is None:
                raise ValidationError("Reports-to client not found", field="reports_to_id")
        cleaned["reports_to_id"] = reports_to_id
        return cleaned

    async def list_clients(self, user_id: str) -> list[dict]:
        """
        List the user's clients, newest first.

        Returns:
            list[dict]: Clients with session_count
        """
        rows = await client_crud.list_with_session_counts(self.db, user_id)
        return [client_to_dict(client, count) for client, count in rows]

    async def get_client(self, user_id: str, client_id: UUID) -> dict:
        """
        Get a client with hierarchy, team, recent sessions and notes.

        Team members are read from both sides of the link.

        Raises:
            NotFoundError: If the client is not owned by the user
        """
        client = await client_crud.get_detail(self.db, client_id, user_id)
        if client is None:
            raise NotFoundError("Client", client_id)

        team = {c.id: c for c in [*client.team_members, *client.team_member_of]}
        sessions = await session_crud.recent_for_client(
            self.db, client_id, limit=RECENT_SESSIONS_LIMIT
        )
        session_count = await client_crud.count_sessions(self.db, client_id)

        data = client_to_dict(client, session_count)
        data.update({
            "reports_to": client_ref(client.reports_to) if client.reports_to else None,
            "direct_reports": [client_ref(c) for c in client.direct_reports],
            "team_members": [client_ref(c) for c in sorted(team.values(), key=lambda c: c.name)],
            "sessions": [session_summary(s) for s in sessions],
            "notes": [note_to_dict(n) for n in client.notes],
        })
        return data

    async def create_client(self, user_id: str, data: dict) -> dict:
        """
        Create a client.

        Args:
            user_id: Current user id
            data: Client form fields

        Returns:
            dict: Created client
        """
        cleaned = await self._clean_fields(user_id, data)
        client = await client_crud.create(self.db, user_id=user_id, **cleaned)
        logger.info("Client created", extra={"user_id": user_id, "client_id": str(client.id)})
        return client_to_dict(client)

    async def update_client(self, user_id: str, client_id: UUID, data: dict) -> dict:
        """
        Replace a client's editable fields.

        Raises:
            NotFoundError: If the client is not owned by the user
        """
        client = await self._get_owned(client_id, user_id)
        cleaned = await self._clean_fields(user_id, data, client_id=client_id)
        await client_crud.update(self.db, client, **cleaned)
        session_count = await client_crud.count_sessions(self.db, client_id)
        logger.info("Client updated", extra={"user_id": user_id, "client_id": str(client_id)})
        return client_to_dict(client, session_count)

    async def delete_client(self, user_id: str, client_id: UUID) -> None:
        """
        Delete a client with its sessions and notes.

        Raises:
            NotFoundError: If the client is not owned by the user
        """
        client = await client_crud.get_owned_for_delete(self.db, client_id, user_id)
        if client is None:
            raise NotFoundError("Client", client_id)
        await client_crud.delete(self.db, client)
        logger.info("Client deleted", extra={"user_id": user_id, "client_id": str(client_id)})

    async def add_team_member(self, user_id: str, client_id: UUID, member_id: UUID) -> None:
        """
        Link two of the user's clients as team members.

        Raises:
            ValidationError: If both ids are the same client
            NotFoundError: If either client is not owned by the user
            ConflictError: If they are already linked
        """
        if client_id == member_id:
            raise ValidationError("A client cannot be their own team member", field="member_id")
        await self._get_owned(client_id, user_id)
        await self._get_owned(member_id, user_id)
        if await client_crud.are_team_members(self.db, client_id, member_id):
            raise ConflictError("Already team members")
        await client_crud.add_team_member(self.db, client_id, member_id)
        logger.info(
            "Team member added",
            extra={"user_id": user_id, "client_id": str(client_id), "member_id": str(member_id)},
        )

    async def remove_team_member(self, user_id: str, client_id: UUID, member_id: UUID) -> None:
        """
        Remove the team link between two clients.

        Raises:
            NotFoundError: If either client is not owned by the user
        """
        await self._get_owned(client_id, user_id)
        await self._get_owned(member_id, user_id)
        removed = await client_crud.remove_team_member(self.db, client_id, member_id)
        logger.info(
            "Team member removed",
            extra={
                "user_id": user_id,
                "client_id": str(client_id),
                "member_id": str(member_id),
                "removed": removed,
            },
        )

    async def list_client_resources(self, user_id: str, client_id: UUID) -> list[dict]:
        """
        List resources suggested to a client, newest first.

        Raises:
            NotFoundError: If the client is not owned by the user
        """
        await self._get_owned(client_id, user_id)
        links = await resource_crud.list_for_client(self.db, client_id)
        return [client_resource_to_dict(link) for link in links]
