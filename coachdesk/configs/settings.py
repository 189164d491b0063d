"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from coachdesk.configs.base import BaseSettings
from coachdesk.configs.context_documents import ContextDocumentsSettings
from coachdesk.configs.database import DatabaseSettings
from coachdesk.configs.llm import LLMSettings
from coachdesk.configs.security import SecuritySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings = SecuritySettings()
    llm: LLMSettings = LLMSettings()
    context_documents: ContextDocumentsSettings = ContextDocumentsSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from coachdesk.configs import get_settings
        settings = get_settings()
    """
    return Settings()
