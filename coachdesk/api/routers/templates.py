"""
Prompt template API endpoints.

Routes:
- GET /templates - List templates with active flag
- POST /templates - Create template
- PUT /templates/{id} - Rename / rewrite template
- DELETE /templates/{id} - Delete template (not the active one)
- POST /templates/{id}/set-default - Make template the active prompt

Dependencies: coachdesk.application.services.template_service
System role: Prompt template HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_template_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import TemplateService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.common import DeletedResponse, SuccessResponse
from coachdesk.models.template import (
    CreateTemplateRequest,
    TemplateResponse,
    UpdateTemplateRequest,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=SuccessResponse[list[TemplateResponse]])
@handle_action_errors("Failed to fetch templates")
async def list_templates(
    user: UserModel = Depends(get_current_user),
    template_service: TemplateService = Depends(get_template_service),
):
    templates = await template_service.list_templates(user.id)
    return SuccessResponse(data=[TemplateResponse(**t) for t in templates])


@router.post("", response_model=SuccessResponse[TemplateResponse], status_code=201)
@handle_action_errors("Failed to create template")
async def create_template(
    request: CreateTemplateRequest,
    user: UserModel = Depends(get_current_user),
    template_service: TemplateService = Depends(get_template_service),
):
    template = await template_service.create_template(
        user.id, request.name, request.type, request.content
    )
    return SuccessResponse(data=TemplateResponse(**template))


@router.put("/{template_id}", response_model=SuccessResponse[TemplateResponse])
@handle_action_errors("Failed to update template")
async def update_template(
    template_id: UUID,
    request: UpdateTemplateRequest,
    user: UserModel = Depends(get_current_user),
    template_service: TemplateService = Depends(get_template_service),
):
    template = await template_service.update_template(
        user.id, template_id, request.name, request.content
    )
    return SuccessResponse(data=TemplateResponse(**template))


@router.delete("/{template_id}", response_model=SuccessResponse[DeletedResponse])
@handle_action_errors("Failed to delete template")
async def delete_template(
    template_id: UUID,
    user: UserModel = Depends(get_current_user),
    template_service: TemplateService = Depends(get_template_service),
):
    """
    Delete a template.

    Raises:
        NotFoundError: Template not owned by the user
        ConflictError: Template is the active prompt of its type
    """
    await template_service.delete_template(user.id, template_id)
    return SuccessResponse(data=DeletedResponse(id=str(template_id)))


@router.post("/{template_id}/set-default", response_model=SuccessResponse[TemplateResponse])
@handle_action_errors("Failed to set default template")
async def set_default_template(
    template_id: UUID,
    user: UserModel = Depends(get_current_user),
    template_service: TemplateService = Depends(get_template_service),
):
    """Copy the template's content into the user's active prompt."""
    template = await template_service.set_template_as_default(user.id, template_id)
    return SuccessResponse(data=TemplateResponse(**template))
