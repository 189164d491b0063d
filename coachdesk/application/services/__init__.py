"""
Application services: one orchestrator per use-case area.

Each service wraps an AsyncSession, validates input, enforces ownership,
and returns plain dicts. Domain failures raise coachdesk.core.exceptions.
"""

from coachdesk.application.services.client_service import ClientService
from coachdesk.application.services.context_document_service import ContextDocumentService
from coachdesk.application.services.dashboard_service import DashboardService
from coachdesk.application.services.note_service import NoteService
from coachdesk.application.services.resource_service import ResourceService
from coachdesk.application.services.session_ai_service import SessionAIService
from coachdesk.application.services.session_service import SessionService
from coachdesk.application.services.settings_service import SettingsService
from coachdesk.application.services.tag_service import TagService
from coachdesk.application.services.template_service import TemplateService
from coachdesk.application.services.user_service import UserService

__all__ = [
    "ClientService",
    "ContextDocumentService",
    "DashboardService",
    "NoteService",
    "ResourceService",
    "SessionAIService",
    "SessionService",
    "SettingsService",
    "TagService",
    "TemplateService",
    "UserService",
]
