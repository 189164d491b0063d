"""
Client ORM model.

Represents a coachee owned by one coach, with an optional reports-to
link and a team-member relation to other clients of the same coach.

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Client persistence and organizational hierarchy
"""

from datetime import date
from uuid import UUID

from sqlalchemy import Column, Date, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coachdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin

# A team pair is stored once; readers union both directions.
client_team_members = Table(
    "client_team_members",
    Base.metadata,
    Column("client_id", Uuid, ForeignKey("clients.id", ondelete="CASCADE"), primary_key=True),
    Column("member_id", Uuid, ForeignKey("clients.id", ondelete="CASCADE"), primary_key=True),
)


class ClientModel(Base, UUIDMixin, TimestampMixin):
    """
    Client ORM model.

    Deleting a client deletes its sessions, notes and resource links.
    Direct reports survive with reports_to_id cleared.

    Relationships:
        reports_to: Manager client (many-to-one, self)
        direct_reports: Clients reporting to this one
        team_members: Team links created from this client
        team_member_of: Team links created from the other side
        sessions: Coaching sessions (cascade delete)
        notes: Client notes (cascade delete)
        client_resources: Suggested resources (cascade delete)
    """

    __tablename__ = "clients"

    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    role: Mapped[str | None] = mapped_column(String(200), nullable=True)
    company: Mapped[str | None] = mapped_column(String(200), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)
    coaching_since: Mapped[date | None] = mapped_column(Date, nullable=True)
    career_goal: Mapped[str | None] = mapped_column(Text, nullable=True)
    key_challenge: Mapped[str | None] = mapped_column(Text, nullable=True)
    key_stakeholders: Mapped[str | None] = mapped_column(Text, nullable=True)
    reports_to_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("clients.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    reports_to = relationship(
        "ClientModel",
        remote_side="ClientModel.id",
        back_populates="direct_reports",
        foreign_keys=[reports_to_id],
    )
    direct_reports = relationship(
        "ClientModel",
        back_populates="reports_to",
        foreign_keys=[reports_to_id],
        order_by="ClientModel.name",
    )
    team_members = relationship(
        "ClientModel",
        secondary=client_team_members,
        primaryjoin="ClientModel.id == client_team_members.c.client_id",
        secondaryjoin="ClientModel.id == client_team_members.c.member_id",
        back_populates="team_member_of",
    )
    team_member_of = relationship(
        "ClientModel",
        secondary=client_team_members,
        primaryjoin="ClientModel.id == client_team_members.c.member_id",
        secondaryjoin="ClientModel.id == client_team_members.c.client_id",
        back_populates="team_members",
    )
    sessions = relationship(
        "CoachingSessionModel",
        back_populates="client",
        cascade="all, delete-orphan",
    )
    notes = relationship(
        "ClientNoteModel",
        back_populates="client",
        cascade="all, delete-orphan",
        order_by="ClientNoteModel.created_at.desc()",
    )
    client_resources = relationship(
        "ClientResourceModel",
        back_populates="client",
        cascade="all, delete-orphan",
    )
