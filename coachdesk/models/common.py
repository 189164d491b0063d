"""
Common response models and utilities.

Every endpoint answers with SuccessResponse or ErrorResponse, so callers
can branch on `success` alone.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response wrapper."""

    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")


class DeletedResponse(BaseModel):
    """Payload of delete operations."""

    id: str
    deleted: bool = True
