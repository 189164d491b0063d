"""
Resource library service.

The library is shared across coaches. Coaches add resources by hand and
share them with their own clients; session analysis adds AI suggestions
through SessionAIService.

Dependencies: coachdesk.boundary.db.CRUD
System role: Resource library and coach suggestions
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services.mappers import client_resource_to_dict, resource_to_dict
from coachdesk.boundary.db.CRUD.client_crud import client_crud
from coachdesk.boundary.db.CRUD.resource_crud import resource_crud
from coachdesk.boundary.db.CRUD.tag_crud import tag_crud
from coachdesk.boundary.db.models import TagCategory
from coachdesk.core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 300


class ResourceService:
    """Resource library operations."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_resources(self, tag: str | None = None) -> list[dict]:
        """List the resource library, optionally filtered by tag name."""
        resources = await resource_crud.list_with_tags(self.db, tag=tag.strip().lower() if tag else None)
        return [resource_to_dict(r) for r in resources]

    async def create_resource(
        self,
        title: str,
        url: str,
        type: str = "article",
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> dict:
        """
        Add a resource to the library.

        Tag names are matched case-insensitively against the resource tag
        vocabulary; unknown names are dropped.

        Args:
            title: Resource title
            url: Where to find it
            type: article, framework, tool, book, video...
            description: Why it is useful
            tags: Resource tag names

        Returns:
            dict: Created resource with tag names

        Raises:
            ValidationError: If title or url is blank, or title is too long
        """
        title = (title or "").strip()
        url = (url or "").strip()
        if not title:
            raise ValidationError("Title is required", field="title")
        if len(title) > MAX_TITLE_LENGTH:
            raise ValidationError("Title is too long", field="title")
        if not url:
            raise ValidationError("URL is required", field="url")

        names = {t.strip().lower() for t in tags or [] if t.strip()}
        known = await tag_crud.get_by_names(self.db, names, TagCategory.RESOURCE)
        resource = await resource_crud.create(
            self.db,
            title=title,
            url=url,
            type=(type or "").strip().lower() or "article",
            description=(description or "").strip() or None,
            tags=list(known),
        )
        logger.info(
            "Resource created",
            extra={"resource_id": str(resource.id), "tag_count": len(known)},
        )
        return resource_to_dict(await resource_crud.get_with_tags(self.db, resource.id))

    async def share_with_client(self, user_id: str, client_id: UUID, resource_id: UUID) -> dict:
        """
        Suggest a library resource to one of the user's clients.

        Returns:
            dict: Client suggestion with suggested_by "coach"

        Raises:
            NotFoundError: If the client is not owned by the user or the resource is missing
            ConflictError: If the resource was already shared with the client
        """
        if await client_crud.get_owned(self.db, client_id, user_id) is None:
            raise NotFoundError("Client", client_id)
        if await resource_crud.get_by_id(self.db, resource_id) is None:
            raise NotFoundError("Resource", resource_id)

        link = await resource_crud.link_to_client(
            self.db,
            client_id=client_id,
            resource_id=resource_id,
            suggested_by="coach",
        )
        if link is None:
            raise ConflictError("Resource already shared with this client")
        logger.info(
            "Resource shared with client",
            extra={"user_id": user_id, "client_id": str(client_id), "resource_id": str(resource_id)},
        )
        return client_resource_to_dict(await resource_crud.get_link(self.db, link.id))
