"""
Security configuration settings.

Secrets for at-rest encryption of user API keys and for verifying
identity-provider tokens.

Dependencies: pydantic_settings
System role: Authentication and encryption configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from coachdesk.configs.base import BaseSettings


class SecuritySettings(BaseSettings):
    """Encryption and Firebase authentication settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SECURITY_",
        case_sensitive=False,
        extra="ignore",
    )

    encryption_key: str = Field(
        default="",
        description="Urlsafe base64 Fernet key used to encrypt stored Claude API keys",
    )
    firebase_credentials: str | None = Field(
        default=None,
        description="Path to a Firebase service account JSON file",
    )
    firebase_project_id: str | None = Field(
        default=None,
        description="Firebase project id (used when no service account file is set)",
    )
