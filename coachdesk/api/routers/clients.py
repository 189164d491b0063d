"""
Client API endpoints.

Routes:
- GET /clients - List clients with session counts
- POST /clients - Create client
- GET /clients/{id} - Client detail (hierarchy, team, sessions, notes)
- PUT /clients/{id} - Update client
- DELETE /clients/{id} - Delete client with sessions and notes
- POST /clients/{id}/team-members - Link team member
- DELETE /clients/{id}/team-members/{member_id} - Unlink team member
- GET /clients/{id}/resources - Resources suggested to client
- POST /clients/{id}/resources - Share a library resource with client
- GET /clients/{id}/sessions - Client sessions, date desc
- GET /clients/{id}/notes - Client notes
- POST /clients/{id}/notes - Add client note

Dependencies: coachdesk.application.services, coachdesk.models.client
System role: Client management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import (
    get_client_service,
    get_note_service,
    get_resource_service,
    get_session_service,
)
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import (
    ClientService,
    NoteService,
    ResourceService,
    SessionService,
)
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.client import (
    ClientDetailResponse,
    ClientResponse,
    CreateClientRequest,
    NoteRequest,
    NoteResponse,
    TeamMemberRequest,
    UpdateClientRequest,
)
from coachdesk.models.common import DeletedResponse, SuccessResponse
from coachdesk.models.session import SessionListItem
from coachdesk.models.tag import ClientResourceResponse, ShareResourceRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=SuccessResponse[list[ClientResponse]])
@handle_action_errors("Failed to fetch clients")
async def list_clients(
    user: UserModel = Depends(get_current_user),
    client_service: ClientService = Depends(get_client_service),
):
    clients = await client_service.list_clients(user.id)
    return SuccessResponse(data=[ClientResponse(**c) for c in clients])


@router.post("", response_model=SuccessResponse[ClientResponse], status_code=201)
@handle_action_errors("Failed to create client")
async def create_client(
    request: CreateClientRequest,
    user: UserModel = Depends(get_current_user),
    client_service: ClientService = Depends(get_client_service),
):
    """
    Create a client.

    Args:
        request: Client form fields (blank strings treated as empty)
        user: Authenticated user
        client_service: Injected ClientService

    Returns:
        SuccessResponse[ClientResponse]: Created client

    Raises:
        ValidationError: Missing name, invalid email or bad reports-to
    """
    client = await client_service.create_client(user.id, request.model_dump())
    return SuccessResponse(data=ClientResponse(**client))


@router.get("/{client_id}", response_model=SuccessResponse[ClientDetailResponse])
@handle_action_errors("Failed to fetch client")
async def get_client(
    client_id: UUID,
    user: UserModel = Depends(get_current_user),
    client_service: ClientService = Depends(get_client_service),
):
    client = await client_service.get_client(user.id, client_id)
    return SuccessResponse(data=ClientDetailResponse(**client))


@router.put("/{client_id}", response_model=SuccessResponse[ClientResponse])
@handle_action_errors("Failed to update client")
async def update_client(
    client_id: UUID,
    request: UpdateClientRequest,
    user: UserModel = Depends(get_current_user),
    client_service: ClientService = Depends(get_client_service),
):
    client = await client_service.update_client(user.id, client_id, request.model_dump())
    return SuccessResponse(data=ClientResponse(**client))


@router.delete("/{client_id}", response_model=SuccessResponse[DeletedResponse])
@handle_action_errors("Failed to delete client")
async def delete_client(
    client_id: UUID,
    user: UserModel = Depends(get_current_user),
    client_service: ClientService = Depends(get_client_service),
):
    """Delete a client together with its sessions and notes."""
    await client_service.delete_client(user.id, client_id)
    return SuccessResponse(data=DeletedResponse(id=str(client_id)))


@router.post("/{client_id}/team-members", response_model=SuccessResponse[ClientDetailResponse])
@handle_action_errors("Failed to add team member")
async def add_team_member(
    client_id: UUID,
    request: TeamMemberRequest,
    user: UserModel = Depends(get_current_user),
    client_service: ClientService = Depends(get_client_service),
):
    """
    Link two clients as team members and return the refreshed client.

    Raises:
        NotFoundError: Either client not owned by the user
        ValidationError: Client linked to itself
        ConflictError: Already team members
    """
    await client_service.add_team_member(user.id, client_id, request.member_id)
    client = await client_service.get_client(user.id, client_id)
    return SuccessResponse(data=ClientDetailResponse(**client))


@router.delete(
    "/{client_id}/team-members/{member_id}",
    response_model=SuccessResponse[ClientDetailResponse],
)
@handle_action_errors("Failed to remove team member")
async def remove_team_member(
    client_id: UUID,
    member_id: UUID,
    user: UserModel = Depends(get_current_user),
    client_service: ClientService = Depends(get_client_service),
):
    await client_service.remove_team_member(user.id, client_id, member_id)
    client = await client_service.get_client(user.id, client_id)
    return SuccessResponse(data=ClientDetailResponse(**client))


@router.get("/{client_id}/resources", response_model=SuccessResponse[list[ClientResourceResponse]])
@handle_action_errors("Failed to fetch client resources")
async def list_client_resources(
    client_id: UUID,
    user: UserModel = Depends(get_current_user),
    client_service: ClientService = Depends(get_client_service),
):
    resources = await client_service.list_client_resources(user.id, client_id)
    return SuccessResponse(data=[ClientResourceResponse(**r) for r in resources])


@router.post(
    "/{client_id}/resources",
    response_model=SuccessResponse[ClientResourceResponse],
    status_code=201,
)
@handle_action_errors("Failed to share resource")
async def share_resource(
    client_id: UUID,
    request: ShareResourceRequest,
    user: UserModel = Depends(get_current_user),
    resource_service: ResourceService = Depends(get_resource_service),
):
    """
    Share a library resource with the client (suggested_by "coach").

    Raises:
        NotFoundError: Client not owned by the user, or unknown resource
        ConflictError: Resource already shared with the client
    """
    link = await resource_service.share_with_client(user.id, client_id, request.resource_id)
    return SuccessResponse(data=ClientResourceResponse(**link))


@router.get("/{client_id}/sessions", response_model=SuccessResponse[list[SessionListItem]])
@handle_action_errors("Failed to fetch client sessions")
async def list_client_sessions(
    client_id: UUID,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
):
    sessions = await session_service.list_client_sessions(user.id, client_id)
    return SuccessResponse(data=[SessionListItem(**s) for s in sessions])


@router.get("/{client_id}/notes", response_model=SuccessResponse[list[NoteResponse]])
@handle_action_errors("Failed to fetch notes")
async def list_notes(
    client_id: UUID,
    user: UserModel = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    notes = await note_service.list_notes(user.id, client_id)
    return SuccessResponse(data=[NoteResponse(**n) for n in notes])


@router.post("/{client_id}/notes", response_model=SuccessResponse[NoteResponse], status_code=201)
@handle_action_errors("Failed to create note")
async def create_note(
    client_id: UUID,
    request: NoteRequest,
    user: UserModel = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    note = await note_service.create_note(user.id, client_id, request.content)
    return SuccessResponse(data=NoteResponse(**note))
