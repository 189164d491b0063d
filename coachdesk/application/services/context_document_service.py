"""
Context document service orchestrator.

Uploads are validated, text is extracted, the file is stored in S3 and
the extracted text saved for prompt assembly.

Dependencies: coachdesk.boundary.db.CRUD, coachdesk.boundary.aws, coachdesk.application.document_parser
System role: Context document use case orchestration
"""

import asyncio
import logging
import time
from pathlib import PurePath
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.document_parser import ensure_allowed_file, extract_text
from coachdesk.application.services.mappers import context_document_to_dict
from coachdesk.boundary.aws.s3_client import S3ContextDocumentClient
from coachdesk.boundary.db.CRUD.context_document_crud import context_document_crud
from coachdesk.configs import get_settings
from coachdesk.core.exceptions import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def format_context_documents(documents) -> str:
    """Render documents as delimited blocks separated by blank lines."""
    return "\n\n".join(
        f"--- CONTEXT DOCUMENT: {doc.name} ---\n{doc.content}\n--- END: {doc.name} ---"
        for doc in documents
    )


class ContextDocumentService:
    """Context document orchestrator."""

    def __init__(self, db: AsyncSession, storage: S3ContextDocumentClient | None = None) -> None:
        """
        Initialize context document service.

        Args:
            db: Async SQLAlchemy session
            storage: S3 client (only needed for upload/delete)
        """
        self.db = db
        self.storage = storage

    async def list_documents(self, user_id: str) -> list[dict]:
        """List the user's context documents, newest first."""
        documents = await context_document_crud.list_owned(self.db, user_id)
        return [context_document_to_dict(d) for d in documents]

    async def upload_document(
        self,
        user_id: str,
        filename: str,
        content_type: str | None,
        data: bytes,
    ) -> dict:
        """
        Validate, extract, store and record an uploaded file.

        Args:
            user_id: Current user id
            filename: Original file name
            content_type: MIME type reported by the client
            data: File bytes

        Returns:
            dict: Created document

        Raises:
            ValidationError: For disallowed types, empty or oversized files
            ParsingError: If a PDF cannot be parsed
            StorageError: If the upload fails
        """
        name = PurePath(filename or "").name
        if not name:
            raise ValidationError("No file provided", field="file")
        ensure_allowed_file(name, content_type)
        if not data:
            raise ValidationError("File is empty", field="file")
        max_bytes = get_settings().context_documents.max_upload_bytes
        if len(data) > max_bytes:
            raise ValidationError(
                "File is too large",
                field="file",
                details={"size": len(data), "max_size": max_bytes},
            )

        content = await asyncio.to_thread(extract_text, data, name, content_type)
        file_type = content_type or "application/octet-stream"
        key = f"{user_id}/{int(time.time() * 1000)}-{name}"
        file_url = await asyncio.to_thread(self.storage.upload, key, data, file_type)

        document = await context_document_crud.create(
            self.db,
            user_id=user_id,
            name=name,
            file_url=file_url,
            file_key=key,
            file_type=file_type,
            content=content,
        )
        logger.info(
            "Context document uploaded",
            extra={
                "user_id": user_id,
                "document_id": str(document.id),
                "file_type": file_type,
                "content_chars": len(content),
            },
        )
        return context_document_to_dict(document)

    async def delete_document(self, user_id: str, document_id: UUID) -> None:
        """
        Delete a document; a failed storage delete is logged and ignored.

        Raises:
            NotFoundError: If the document is not owned by the user
        """
        document = await context_document_crud.get_owned(self.db, document_id, user_id)
        if document is None:
            raise NotFoundError("Document", document_id)

        try:
            await asyncio.to_thread(self.storage.delete, document.file_key)
        except StorageError as e:
            logger.warning(
                "Failed to delete stored file, removing record anyway",
                extra={"document_id": str(document_id), "error": str(e)},
            )

        await context_document_crud.delete(self.db, document)
        logger.info("Context document deleted", extra={"user_id": user_id, "document_id": str(document_id)})

    async def get_combined_content(self, user_id: str) -> str:
        """
        Concatenate all of the user's documents for prompt context.

        Returns:
            str: Delimited document blocks ("" if none)
        """
        documents = await context_document_crud.list_owned(self.db, user_id)
        return format_context_documents(documents)
