"""
Coaching session API endpoints.

Routes:
- GET /sessions - List sessions
- POST /sessions - Log session
- GET /sessions/tags - Session tag vocabulary
- GET /sessions/{id} - Session detail with tags and resources
- PUT /sessions/{id} - Partial update
- DELETE /sessions/{id} - Delete session
- PUT /sessions/{id}/tags - Replace session tags

Dependencies: coachdesk.application.services.session_service, coachdesk.models.session
System role: Session management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_session_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import SessionService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.common import DeletedResponse, SuccessResponse
from coachdesk.models.session import (
    CreateSessionRequest,
    SessionDetailResponse,
    SessionListItem,
    UpdateSessionRequest,
    UpdateSessionTagsRequest,
)
from coachdesk.models.tag import TagResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=SuccessResponse[list[SessionListItem]])
@handle_action_errors("Failed to fetch sessions")
async def list_sessions(
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
):
    """
    List all sessions, newest first.

    Args:
        user: Authenticated user
        session_service: Injected SessionService

    Returns:
        SuccessResponse[list[SessionListItem]]: Sessions with client, tags and resource count
    """
    sessions = await session_service.list_sessions(user.id)
    return SuccessResponse(data=[SessionListItem(**s) for s in sessions])


@router.post("", response_model=SuccessResponse[SessionDetailResponse], status_code=201)
@handle_action_errors("Failed to create session")
async def create_session(
    request: CreateSessionRequest,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
):
    """
    Log a coaching session.

    Raises:
        ValidationError: Missing title, client or date
        NotFoundError: Client not owned by the user
    """
    session = await session_service.create_session(
        user.id,
        title=request.title,
        client_id=request.client_id,
        date=request.date,
        transcript=request.transcript,
    )
    return SuccessResponse(data=SessionDetailResponse(**session))


@router.get("/tags", response_model=SuccessResponse[list[TagResponse]])
@handle_action_errors("Failed to fetch session tags")
async def list_session_tags(
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
):
    tags = await session_service.list_session_tags()
    return SuccessResponse(data=[TagResponse(**t) for t in tags])


@router.get("/{session_id}", response_model=SuccessResponse[SessionDetailResponse])
@handle_action_errors("Failed to fetch session")
async def get_session(
    session_id: UUID,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
):
    session = await session_service.get_session(user.id, session_id)
    return SuccessResponse(data=SessionDetailResponse(**session))


@router.put("/{session_id}", response_model=SuccessResponse[SessionDetailResponse])
@handle_action_errors("Failed to update session")
async def update_session(
    session_id: UUID,
    request: UpdateSessionRequest,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
):
    """Update only the fields present in the request body."""
    session = await session_service.update_session(
        user.id, session_id, request.model_dump(exclude_unset=True)
    )
    return SuccessResponse(data=SessionDetailResponse(**session))


@router.delete("/{session_id}", response_model=SuccessResponse[DeletedResponse])
@handle_action_errors("Failed to delete session")
async def delete_session(
    session_id: UUID,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
):
    await session_service.delete_session(user.id, session_id)
    return SuccessResponse(data=DeletedResponse(id=str(session_id)))


@router.put("/{session_id}/tags", response_model=SuccessResponse[SessionDetailResponse])
@handle_action_errors("Failed to update session tags")
async def update_session_tags(
    session_id: UUID,
    request: UpdateSessionTagsRequest,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
):
    """Replace the session's tags with the known session tags named in the request."""
    session = await session_service.update_session_tags(user.id, session_id, request.tag_names)
    return SuccessResponse(data=SessionDetailResponse(**session))
