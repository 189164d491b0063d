"""
Context document API endpoints.

Routes:
- GET /context-documents - List documents
- POST /context-documents - Upload PDF/TXT/MD document
- GET /context-documents/combined - All documents rendered as one context block
- DELETE /context-documents/{id} - Delete document and its stored file

Dependencies: coachdesk.application.services.context_document_service
System role: Context document HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_context_document_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import ContextDocumentService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.common import DeletedResponse, SuccessResponse
from coachdesk.models.context_document import CombinedContextResponse, ContextDocumentResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/context-documents", tags=["context-documents"])


@router.get("", response_model=SuccessResponse[list[ContextDocumentResponse]])
@handle_action_errors("Failed to fetch context documents")
async def list_context_documents(
    user: UserModel = Depends(get_current_user),
    document_service: ContextDocumentService = Depends(get_context_document_service),
):
    documents = await document_service.list_documents(user.id)
    return SuccessResponse(data=[ContextDocumentResponse(**d) for d in documents])


@router.post("", response_model=SuccessResponse[ContextDocumentResponse], status_code=201)
@handle_action_errors("Failed to upload document")
async def upload_context_document(
    file: UploadFile = File(...),
    user: UserModel = Depends(get_current_user),
    document_service: ContextDocumentService = Depends(get_context_document_service),
):
    """
    Upload a context document.

    Args:
        file: Multipart file (PDF, TXT or MD)
        user: Authenticated user
        document_service: Injected ContextDocumentService

    Returns:
        SuccessResponse[ContextDocumentResponse]: Stored document with extracted text

    Raises:
        ValidationError: Unsupported type, empty or oversized file
        ParsingError: PDF text could not be extracted
        StorageError: Upload to S3 failed
    """
    data = await file.read()
    logger.info(
        "Context document upload received",
        extra={"user_id": user.id, "upload_filename": file.filename, "size": len(data)},
    )
    document = await document_service.upload_document(
        user.id,
        filename=file.filename or "",
        content_type=file.content_type,
        data=data,
    )
    return SuccessResponse(data=ContextDocumentResponse(**document))


@router.get("/combined", response_model=SuccessResponse[CombinedContextResponse])
@handle_action_errors("Failed to fetch context")
async def get_combined_context(
    user: UserModel = Depends(get_current_user),
    document_service: ContextDocumentService = Depends(get_context_document_service),
):
    documents = await document_service.list_documents(user.id)
    content = await document_service.get_combined_content(user.id)
    return SuccessResponse(
        data=CombinedContextResponse(content=content, document_count=len(documents))
    )


@router.delete("/{document_id}", response_model=SuccessResponse[DeletedResponse])
@handle_action_errors("Failed to delete document")
async def delete_context_document(
    document_id: UUID,
    user: UserModel = Depends(get_current_user),
    document_service: ContextDocumentService = Depends(get_context_document_service),
):
    await document_service.delete_document(user.id, document_id)
    return SuccessResponse(data=DeletedResponse(id=str(document_id)))
