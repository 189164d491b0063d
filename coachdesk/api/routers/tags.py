"""
Tag and resource library API endpoints.

Routes:
- GET /tags?category= - Tags of one category
- GET /resources?tag= - Resource library, optionally filtered by tag
- POST /resources - Add a resource to the library

Tags and resources are global, not owned by a user.

Dependencies: coachdesk.application.services.tag_service, resource_service
System role: Tag/resource HTTP API
"""

from fastapi import APIRouter, Depends, Query

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_resource_service, get_tag_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import ResourceService, TagService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.common import SuccessResponse
from coachdesk.models.tag import CreateResourceRequest, ResourceResponse, TagResponse

router = APIRouter(tags=["tags"])


@router.get("/tags", response_model=SuccessResponse[list[TagResponse]])
@handle_action_errors("Failed to fetch tags")
async def list_tags(
    category: str = Query("session", description="session or resource"),
    user: UserModel = Depends(get_current_user),
    tag_service: TagService = Depends(get_tag_service),
):
    tags = await tag_service.list_tags(category)
    return SuccessResponse(data=[TagResponse(**t) for t in tags])


@router.get("/resources", response_model=SuccessResponse[list[ResourceResponse]])
@handle_action_errors("Failed to fetch resources")
async def list_resources(
    tag: str | None = Query(None, description="Only resources carrying this tag"),
    user: UserModel = Depends(get_current_user),
    resource_service: ResourceService = Depends(get_resource_service),
):
    resources = await resource_service.list_resources(tag)
    return SuccessResponse(data=[ResourceResponse(**r) for r in resources])


@router.post("/resources", response_model=SuccessResponse[ResourceResponse], status_code=201)
@handle_action_errors("Failed to create resource")
async def create_resource(
    request: CreateResourceRequest,
    user: UserModel = Depends(get_current_user),
    resource_service: ResourceService = Depends(get_resource_service),
):
    """
    Add a resource to the shared library.

    Raises:
        ValidationError: Missing title or URL
    """
    resource = await resource_service.create_resource(
        title=request.title,
        url=request.url,
        type=request.type,
        description=request.description,
        tags=request.tags,
    )
    return SuccessResponse(data=ResourceResponse(**resource))
