"""
Tag vocabulary service.

Dependencies: coachdesk.boundary.db.CRUD
System role: Read access to the shared tag vocabulary
"""

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services.mappers import tag_to_dict
from coachdesk.boundary.db.CRUD.tag_crud import tag_crud
from coachdesk.boundary.db.models import TagCategory
from coachdesk.core.exceptions import ValidationError


class TagService:
    """Shared tag vocabulary (not scoped by user)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_tags(self, category: str) -> list[dict]:
        """
        List tags of one category ordered by name.

        Raises:
            ValidationError: If category is not "session" or "resource"
        """
        try:
            tag_category = TagCategory(category)
        except ValueError as e:
            raise ValidationError("Invalid tag category", field="category") from e
        tags = await tag_crud.list_by_category(self.db, tag_category)
        return [tag_to_dict(t) for t in tags]
