"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: coachdesk.boundary.db
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.api.error_handling import handle_action_errors
from coachdesk.boundary.db import get_async_db
from coachdesk.models.common import SuccessResponse


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=SuccessResponse[HealthResponse])
async def health_check() -> SuccessResponse[HealthResponse]:
    """Basic health check."""
    return SuccessResponse(data=HealthResponse(status="healthy", message="Server Healthy"))


@router.get("/db", response_model=SuccessResponse[HealthResponse])
@handle_action_errors("Database connection failed")
async def health_check_db(
    db: AsyncSession = Depends(get_async_db),
) -> SuccessResponse[HealthResponse]:
    """Database health check."""
    await db.execute(text("SELECT 1"))
    return SuccessResponse(data=HealthResponse(status="healthy", message="Database connection OK"))
