"""
Client note ORM model.

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Free-text notes attached to a client
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coachdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ClientNoteModel(Base, UUIDMixin, TimestampMixin):
    """Note owned through its client; updated_at tracks edits."""

    __tablename__ = "client_notes"

    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    client = relationship("ClientModel", back_populates="notes")
