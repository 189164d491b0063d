"""
Profile API endpoints.

Routes:
- GET /profile - Current user's profile
- PUT /profile - Rename current user

Dependencies: coachdesk.application.services.user_service
System role: Profile HTTP API
"""

from fastapi import APIRouter, Depends

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_user_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import UserService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.common import SuccessResponse
from coachdesk.models.profile import ProfileResponse, UpdateProfileRequest

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=SuccessResponse[ProfileResponse])
@handle_action_errors("Failed to fetch profile")
async def get_profile(
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """Return the authenticated user's profile."""
    profile = await user_service.get_profile(user.id)
    return SuccessResponse(data=ProfileResponse(**profile))


@router.put("", response_model=SuccessResponse[ProfileResponse])
@handle_action_errors("Failed to update profile")
async def update_profile(
    request: UpdateProfileRequest,
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """
    Rename the authenticated user.

    Raises:
        ValidationError: Empty or overlong name
    """
    profile = await user_service.update_profile(user.id, request.name)
    return SuccessResponse(data=ProfileResponse(**profile))
