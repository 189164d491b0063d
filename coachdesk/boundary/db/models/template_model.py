"""
Prompt template ORM model.

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Reusable analysis/preparation instructions per user
"""

import enum

from sqlalchemy import Boolean, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from coachdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class PromptType(str, enum.Enum):
    """
    Which user prompt a template feeds.

    ANALYSIS: Custom post-session analysis
    PREPARATION: Pre-session preparation notes
    """

    ANALYSIS = "analysis"
    PREPARATION = "preparation"


class PromptTemplateModel(Base, UUIDMixin, TimestampMixin):
    """
    Named prompt template.

    A template is "active" when its content equals the user's current
    prompt of the same type; there is no foreign key for it.
    is_default marks the templates seeded at signup.
    """

    __tablename__ = "prompt_templates"

    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[PromptType] = mapped_column(
        Enum(PromptType, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
