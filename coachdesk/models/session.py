"""
Coaching session schemas.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from coachdesk.models.tag import ClientResourceResponse, TagResponse


class CreateSessionRequest(BaseModel):
    """Request schema for logging a session."""

    title: str = ""
    client_id: uuid.UUID | None = None
    date: datetime | None = None
    transcript: str | None = None


class UpdateSessionRequest(BaseModel):
    """Partial update; only fields present in the body are written."""

    title: str | None = None
    date: datetime | None = None
    transcript: str | None = None
    summary: str | None = None
    follow_up_email: str | None = None
    analysis: str | None = None
    preparation_notes: str | None = None


class UpdateSessionTagsRequest(BaseModel):
    tag_names: list[str] = Field(default_factory=list)


class SessionClientRef(BaseModel):
    id: uuid.UUID
    name: str
    company: str | None = None


class SessionSummary(BaseModel):
    """Session row without transcript-sized fields."""

    id: uuid.UUID
    client_id: uuid.UUID
    title: str
    date: datetime
    has_transcript: bool
    has_analysis: bool
    created_at: datetime


class SessionListItem(SessionSummary):
    client: SessionClientRef
    tags: list[TagResponse]
    resource_count: int


class SessionResponse(BaseModel):
    """Full session payload."""

    id: uuid.UUID
    client_id: uuid.UUID
    title: str
    date: datetime
    transcript: str | None
    summary: str | None
    follow_up_email: str | None
    analysis: str | None
    preparation_notes: str | None
    created_at: datetime
    updated_at: datetime


class SessionDetailResponse(SessionResponse):
    client: SessionClientRef
    tags: list[TagResponse]
    resources: list[ClientResourceResponse]
