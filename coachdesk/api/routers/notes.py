"""
Client note API endpoints.

Routes:
- PUT /notes/{id} - Edit note
- DELETE /notes/{id} - Delete note

Notes are created and listed under /clients/{id}/notes.

Dependencies: coachdesk.application.services.note_service
System role: Client note HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_note_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import NoteService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.client import NoteRequest, NoteResponse
from coachdesk.models.common import DeletedResponse, SuccessResponse

router = APIRouter(prefix="/notes", tags=["notes"])


@router.put("/{note_id}", response_model=SuccessResponse[NoteResponse])
@handle_action_errors("Failed to update note")
async def update_note(
    note_id: UUID,
    request: NoteRequest,
    user: UserModel = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    note = await note_service.update_note(user.id, note_id, request.content)
    return SuccessResponse(data=NoteResponse(**note))


@router.delete("/{note_id}", response_model=SuccessResponse[DeletedResponse])
@handle_action_errors("Failed to delete note")
async def delete_note(
    note_id: UUID,
    user: UserModel = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    await note_service.delete_note(user.id, note_id)
    return SuccessResponse(data=DeletedResponse(id=str(note_id)))
