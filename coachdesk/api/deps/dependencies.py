"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: coachdesk.configs, coachdesk.application, coachdesk.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services import (
    ClientService,
    ContextDocumentService,
    DashboardService,
    NoteService,
    ResourceService,
    SessionAIService,
    SessionService,
    SettingsService,
    TagService,
    TemplateService,
    UserService,
)
from coachdesk.boundary.aws.s3_client import S3ContextDocumentClient
from coachdesk.boundary.db import get_async_db
from coachdesk.configs import get_settings
from coachdesk.core.ai.claude_client import ClaudeClient


class ServiceCache:
    """Container for process-wide clients that are expensive to build."""

    def __init__(self) -> None:
        self._s3_client: S3ContextDocumentClient | None = None
        self._claude_client: ClaudeClient | None = None

    @property
    def s3_client(self) -> S3ContextDocumentClient:
        """Get cached S3 context document client."""
        if self._s3_client is None:
            settings = get_settings()
            self._s3_client = S3ContextDocumentClient(
                bucket=settings.context_documents.bucket,
                region=settings.context_documents.region,
            )
        return self._s3_client

    @property
    def claude_client(self) -> ClaudeClient:
        """Get cached Claude client."""
        if self._claude_client is None:
            self._claude_client = ClaudeClient()
        return self._claude_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._s3_client = None
        self._claude_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    return UserService(db=db)


def get_settings_service(db: AsyncSession = Depends(get_async_db)) -> SettingsService:
    return SettingsService(db=db)


def get_template_service(db: AsyncSession = Depends(get_async_db)) -> TemplateService:
    return TemplateService(db=db)


def get_client_service(db: AsyncSession = Depends(get_async_db)) -> ClientService:
    return ClientService(db=db)


def get_note_service(db: AsyncSession = Depends(get_async_db)) -> NoteService:
    return NoteService(db=db)


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    return SessionService(db=db)


def get_resource_service(db: AsyncSession = Depends(get_async_db)) -> ResourceService:
    return ResourceService(db=db)


def get_tag_service(db: AsyncSession = Depends(get_async_db)) -> TagService:
    return TagService(db=db)


def get_dashboard_service(db: AsyncSession = Depends(get_async_db)) -> DashboardService:
    return DashboardService(db=db)


def get_context_document_service(
    db: AsyncSession = Depends(get_async_db),
) -> ContextDocumentService:
    """
    Get context document service with the shared S3 client.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ContextDocumentService: Service instance
    """
    return ContextDocumentService(db=db, storage=get_service_cache().s3_client)


def get_session_ai_service(db: AsyncSession = Depends(get_async_db)) -> SessionAIService:
    """
    Get session AI service with the shared Claude client.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionAIService: Service instance
    """
    return SessionAIService(db=db, claude=get_service_cache().claude_client)
