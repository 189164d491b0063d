"""
Resource ORM models.

Resources are global once discovered; ClientResourceModel records which
client a resource was suggested to, from which session, and by whom.

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Resource library and client suggestions
"""

from uuid import UUID

from sqlalchemy import Column, ForeignKey, String, Table, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coachdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin

resource_tags = Table(
    "resource_tags",
    Base.metadata,
    Column("resource_id", Uuid, ForeignKey("resources.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Uuid, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class ResourceModel(Base, UUIDMixin, TimestampMixin):
    """Coaching artifact (article, framework, tool, book, video...)."""

    __tablename__ = "resources"

    title: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="article")
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    tags = relationship("TagModel", secondary=resource_tags, order_by="TagModel.name")
    client_links = relationship("ClientResourceModel", back_populates="resource")


class ClientResourceModel(Base, UUIDMixin, TimestampMixin):
    """
    Resource suggested to a client.

    Attributes:
        suggested_by: "ai" when created by session analysis, "coach" otherwise
    """

    __tablename__ = "client_resources"
    __table_args__ = (
        UniqueConstraint("client_id", "resource_id", "session_id", name="uq_client_resource_session"),
    )

    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    resource_id: Mapped[UUID] = mapped_column(
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
    )
    session_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("coaching_sessions.id", ondelete="CASCADE"),
        nullable=True,
    )
    suggested_by: Mapped[str] = mapped_column(String(20), nullable=False, default="coach")

    client = relationship("ClientModel", back_populates="client_resources")
    resource = relationship("ResourceModel", back_populates="client_links")
    session = relationship("CoachingSessionModel", back_populates="client_resources")
