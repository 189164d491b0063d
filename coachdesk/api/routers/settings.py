"""
User settings API endpoints.

Routes:
- GET /settings - Masked API key, model and active prompts
- PUT /settings/api-configuration - Store Claude API key and model
- PUT /settings/system-prompt - Replace the analysis or preparation prompt
- GET /settings/models - Supported Claude models

Dependencies: coachdesk.application.services.settings_service
System role: Settings HTTP API
"""

from fastapi import APIRouter, Depends

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_settings_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import SettingsService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.common import SuccessResponse
from coachdesk.models.settings import (
    ClaudeModelsResponse,
    UpdateApiConfigurationRequest,
    UpdateSystemPromptRequest,
    UserSettingsResponse,
)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SuccessResponse[UserSettingsResponse])
@handle_action_errors("Failed to fetch settings")
async def get_user_settings(
    user: UserModel = Depends(get_current_user),
    settings_service: SettingsService = Depends(get_settings_service),
):
    data = await settings_service.get_settings(user.id)
    return SuccessResponse(data=UserSettingsResponse(**data))


@router.put("/api-configuration", response_model=SuccessResponse[UserSettingsResponse])
@handle_action_errors("Failed to update API configuration")
async def update_api_configuration(
    request: UpdateApiConfigurationRequest,
    user: UserModel = Depends(get_current_user),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """
    Encrypt and store the user's Claude API key and chosen model.

    Raises:
        ValidationError: Missing key or unsupported model
    """
    data = await settings_service.update_api_configuration(user.id, request.api_key, request.model)
    return SuccessResponse(data=UserSettingsResponse(**data))


@router.put("/system-prompt", response_model=SuccessResponse[UserSettingsResponse])
@handle_action_errors("Failed to update system prompt")
async def update_system_prompt(
    request: UpdateSystemPromptRequest,
    user: UserModel = Depends(get_current_user),
    settings_service: SettingsService = Depends(get_settings_service),
):
    data = await settings_service.update_system_prompt(user.id, request.type, request.prompt)
    return SuccessResponse(data=UserSettingsResponse(**data))


@router.get("/models", response_model=SuccessResponse[ClaudeModelsResponse])
async def list_models(user: UserModel = Depends(get_current_user)):
    """List the Claude models a user can pick from."""
    return SuccessResponse(data=ClaudeModelsResponse(**SettingsService.list_models()))
