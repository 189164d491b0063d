"""
AI feature schemas.

Dependencies: pydantic
System role: Session analysis API contracts
"""

from pydantic import BaseModel

from coachdesk.core.ai.schemas import ParsedResource


class AnalysisResponse(BaseModel):
    """Result of analyzing one session."""

    summary: str | None
    follow_up_email: str | None
    analysis: str | None
    tags: list[str]
    resources: list[ParsedResource]


class PreparationResponse(BaseModel):
    preparation_notes: str


class DiscoveredResourcesResponse(BaseModel):
    resources: list[ParsedResource]
