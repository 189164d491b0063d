"""
Client and client note schemas.

Empty strings coming from HTML forms are treated as "not provided".

Dependencies: pydantic
System role: Client API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from coachdesk.models.session import SessionSummary


class ClientFields(BaseModel):
    """Editable client fields shared by create and update."""

    name: str = ""
    role: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    birthday: date | None = None
    coaching_since: date | None = None
    career_goal: str | None = None
    key_challenge: str | None = None
    key_stakeholders: str | None = None
    reports_to_id: uuid.UUID | None = None

    @field_validator("birthday", "coaching_since", "reports_to_id", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CreateClientRequest(ClientFields):
    """Request schema for creating a client."""


class UpdateClientRequest(ClientFields):
    """Request schema for updating a client (full form resubmission)."""


class TeamMemberRequest(BaseModel):
    member_id: uuid.UUID


class ClientRef(BaseModel):
    """Compact client reference used inside other payloads."""

    id: uuid.UUID
    name: str
    role: str | None = None
    company: str | None = None


class ClientResponse(BaseModel):
    """Client list/create/update payload."""

    id: uuid.UUID
    name: str
    role: str | None
    company: str | None
    email: str | None
    phone: str | None
    birthday: date | None
    coaching_since: date | None
    career_goal: str | None
    key_challenge: str | None
    key_stakeholders: str | None
    reports_to_id: uuid.UUID | None
    session_count: int = 0
    created_at: datetime
    updated_at: datetime


class NoteRequest(BaseModel):
    content: str = Field(description="Note text")


class NoteResponse(BaseModel):
    id: uuid.UUID
    client_id: uuid.UUID
    content: str
    created_at: datetime
    updated_at: datetime


class ClientDetailResponse(ClientResponse):
    """Client with hierarchy, team, recent sessions and notes."""

    reports_to: ClientRef | None
    direct_reports: list[ClientRef]
    team_members: list[ClientRef]
    sessions: list[SessionSummary]
    notes: list[NoteResponse]
