"""
Tag and resource schemas.

Dependencies: pydantic
System role: Tag/resource API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class TagResponse(BaseModel):
    id: uuid.UUID
    name: str
    category: str


class ResourceResponse(BaseModel):
    """Resource library entry."""

    id: uuid.UUID
    title: str
    type: str
    url: str | None
    description: str | None
    tags: list[str]


class CreateResourceRequest(BaseModel):
    """Request schema for adding a resource to the library."""

    title: str = ""
    url: str = ""
    type: str = "article"
    description: str | None = None
    tags: list[str] = Field(default_factory=list, description="Resource tag names")


class ShareResourceRequest(BaseModel):
    resource_id: uuid.UUID


class ClientResourceResponse(BaseModel):
    """Resource suggested to a client."""

    id: uuid.UUID
    session_id: uuid.UUID | None
    suggested_by: str
    created_at: datetime
    resource: ResourceResponse
