"""
AI session analysis API endpoints.

Routes:
- POST /sessions/{id}/analyze - Analyze transcript and store results
- POST /sessions/{id}/reanalyze - Clear previous results and analyze again
- POST /sessions/{id}/discover-resources - Suggest resources without saving
- POST /clients/{id}/prepare - Preparation notes for the next session

All calls use the authenticated user's own Claude API key and model.

Dependencies: coachdesk.application.services.session_ai_service
System role: AI analysis HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_session_ai_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import SessionAIService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.ai import AnalysisResponse, DiscoveredResourcesResponse, PreparationResponse
from coachdesk.models.common import SuccessResponse

router = APIRouter(tags=["ai"])


@router.post("/sessions/{session_id}/analyze", response_model=SuccessResponse[AnalysisResponse])
@handle_action_errors("Failed to analyze session")
async def analyze_session(
    session_id: UUID,
    user: UserModel = Depends(get_current_user),
    ai_service: SessionAIService = Depends(get_session_ai_service),
):
    """
    Run the full analysis on a session transcript.

    Raises:
        NotFoundError: Session not owned by the user
        ValidationError: Session has no transcript
        APIKeyNotConfiguredError: No usable Claude API key
        AIServiceError: Claude call failed
    """
    result = await ai_service.analyze_session(user.id, session_id)
    return SuccessResponse(data=AnalysisResponse(**result))


@router.post("/sessions/{session_id}/reanalyze", response_model=SuccessResponse[AnalysisResponse])
@handle_action_errors("Failed to reanalyze session")
async def reanalyze_session(
    session_id: UUID,
    user: UserModel = Depends(get_current_user),
    ai_service: SessionAIService = Depends(get_session_ai_service),
):
    result = await ai_service.reanalyze_session(user.id, session_id)
    return SuccessResponse(data=AnalysisResponse(**result))


@router.post(
    "/sessions/{session_id}/discover-resources",
    response_model=SuccessResponse[DiscoveredResourcesResponse],
)
@handle_action_errors("Failed to discover resources")
async def discover_resources(
    session_id: UUID,
    user: UserModel = Depends(get_current_user),
    ai_service: SessionAIService = Depends(get_session_ai_service),
):
    result = await ai_service.discover_session_resources(user.id, session_id)
    return SuccessResponse(data=DiscoveredResourcesResponse(**result))


@router.post("/clients/{client_id}/prepare", response_model=SuccessResponse[PreparationResponse])
@handle_action_errors("Failed to prepare for session")
async def prepare_for_session(
    client_id: UUID,
    user: UserModel = Depends(get_current_user),
    ai_service: SessionAIService = Depends(get_session_ai_service),
):
    """Generate talking points from the client's most recent sessions."""
    result = await ai_service.prepare_for_session(user.id, client_id)
    return SuccessResponse(data=PreparationResponse(**result))
