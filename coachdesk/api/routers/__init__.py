"""API routers."""

from .ai import router as ai_router
from .clients import router as clients_router
from .context_documents import router as context_documents_router
from .dashboard import router as dashboard_router
from .health import router as health_router
from .notes import router as notes_router
from .profile import router as profile_router
from .sessions import router as sessions_router
from .settings import router as settings_router
from .tags import router as tags_router
from .templates import router as templates_router

__all__ = [
    "ai_router",
    "clients_router",
    "context_documents_router",
    "dashboard_router",
    "health_router",
    "notes_router",
    "profile_router",
    "sessions_router",
    "settings_router",
    "tags_router",
    "templates_router",
]
