"""
Prompt template schemas.

Dependencies: pydantic
System role: Prompt template API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class CreateTemplateRequest(BaseModel):
    """Request schema for creating a prompt template."""

    name: str = Field(min_length=1, max_length=200)
    type: Literal["analysis", "preparation"]
    content: str = Field(min_length=1)


class UpdateTemplateRequest(BaseModel):
    """Request schema for renaming or rewriting a prompt template."""

    name: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)


class TemplateResponse(BaseModel):
    """Response schema for prompt templates."""

    id: uuid.UUID
    name: str
    type: str
    content: str
    is_default: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime
