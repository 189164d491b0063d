"""
Coaching session ORM model.

A dated meeting with one client, holding the transcript and the
AI-derived fields written back by session analysis.

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Session persistence and AI output storage
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coachdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin

session_tags = Table(
    "session_tags",
    Base.metadata,
    Column("session_id", Uuid, ForeignKey("coaching_sessions.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Uuid, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class CoachingSessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Coaching session ORM model.

    user_id duplicates the owning client's user so list queries need no join.

    Attributes:
        title: Session title
        date: When the session took place
        transcript: Raw transcript text
        summary: AI summary
        follow_up_email: AI follow-up email draft
        analysis: AI output of the user's custom analysis prompt
        preparation_notes: Coach preparation notes
    """

    __tablename__ = "coaching_sessions"

    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    transcript: Mapped[str | None] = mapped_column(Text, nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    follow_up_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    analysis: Mapped[str | None] = mapped_column(Text, nullable=True)
    preparation_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    client = relationship("ClientModel", back_populates="sessions")
    tags = relationship("TagModel", secondary=session_tags, order_by="TagModel.name")
    client_resources = relationship(
        "ClientResourceModel",
        back_populates="session",
        cascade="all, delete-orphan",
    )
