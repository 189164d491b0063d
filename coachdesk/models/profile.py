"""
Profile schemas.

Dependencies: pydantic
System role: Profile API contracts
"""

from pydantic import BaseModel


class UpdateProfileRequest(BaseModel):
    """Request schema for renaming the current user."""

    name: str


class ProfileResponse(BaseModel):
    """Response schema for the current user's profile."""

    id: str
    email: str
    name: str | None
