"""
Context documents bucket configuration.

Settings for storage of user-uploaded context documents.

Dependencies: pydantic_settings
System role: S3 context documents bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContextDocumentsSettings(BaseSettings):
    """Settings for S3 context document storage."""

    model_config = SettingsConfigDict(
        env_prefix="S3_CONTEXT_DOCUMENTS_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="coachdesk-dev-context-documents",
        description="S3 bucket for uploaded context documents",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Largest accepted upload in bytes",
    )
