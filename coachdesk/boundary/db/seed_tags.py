"""
Tag seeding script.

Upserts the predefined session and resource tag vocabularies.

Dependencies: sqlalchemy, coachdesk.core.ai.prompts
System role: Reference data initialization

Usage:
    python -m coachdesk.boundary.db.seed_tags
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.boundary.db.connection import get_async_session_factory
from coachdesk.boundary.db.CRUD.tag_crud import tag_crud
from coachdesk.boundary.db.models.tag_model import TagCategory
from coachdesk.core.ai.prompts import RESOURCE_TAGS, SESSION_TAGS

logger = logging.getLogger(__name__)


async def seed_tags(session: AsyncSession) -> int:
    """
    Create any missing predefined tags.

    Args:
        session: Async database session (caller commits)

    Returns:
        int: Number of tags created
    """
    created = 0
    for category, names in (
        (TagCategory.SESSION, SESSION_TAGS),
        (TagCategory.RESOURCE, RESOURCE_TAGS),
    ):
        for name in names:
            _, was_created = await tag_crud.get_or_create(session, name, category)
            created += int(was_created)
    logger.info("Tags seeded", extra={"created": created})
    return created


async def run_seed() -> int:
    """Seed tags in a dedicated transaction."""
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        created = await seed_tags(session)
        await session.commit()
    return created


if __name__ == "__main__":
    from coachdesk.observability.logger import configure_logging

    configure_logging()
    asyncio.run(run_seed())
