"""
Tag ORM model.

Tags are global (not owned by a user) and split into two vocabularies:
session themes and resource topics.

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Shared classification vocabulary
"""

import enum

from sqlalchemy import Enum, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from coachdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class TagCategory(str, enum.Enum):
    """
    Tag vocabularies.

    SESSION: Themes assigned to coaching sessions
    RESOURCE: Topics and formats assigned to resources
    """

    SESSION = "session"
    RESOURCE = "resource"


class TagModel(Base, UUIDMixin, TimestampMixin):
    """Tag unique per (name, category)."""

    __tablename__ = "tags"
    __table_args__ = (UniqueConstraint("name", "category", name="uq_tags_name_category"),)

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    category: Mapped[TagCategory] = mapped_column(
        Enum(TagCategory, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
