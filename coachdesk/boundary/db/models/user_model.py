"""
User ORM model.

One row per identity-provider account. The primary key is the provider uid
so every other table can scope ownership without a lookup.

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Coach account, API key and prompt preferences
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from coachdesk.boundary.db.base import Base, TimestampMixin
from coachdesk.core.ai.claude_models import DEFAULT_CLAUDE_MODEL


class UserModel(Base, TimestampMixin):
    """
    Coach account.

    Attributes:
        id: Identity provider uid
        email: Login email
        name: Display name
        claude_api_key: Fernet token of the user's Claude API key
        claude_model: Selected Claude model id
        analysis_prompt: Active custom analysis instructions
        preparation_prompt: Active session preparation instructions
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    claude_api_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    claude_model: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default=DEFAULT_CLAUDE_MODEL,
    )
    analysis_prompt: Mapped[str | None] = mapped_column(Text, nullable=True)
    preparation_prompt: Mapped[str | None] = mapped_column(Text, nullable=True)
