"""
LLM configuration settings.

Model defaults and request limits for Claude calls.

Dependencies: pydantic_settings
System role: AI integration configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from coachdesk.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Anthropic Claude call configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CLAUDE_",
        case_sensitive=False,
        extra="ignore",
    )

    default_model: str = Field(
        default="claude-opus-4-20250514",
        description="Model used when the user has not picked one",
    )
    max_tokens: int = Field(default=4000, description="Max tokens per completion")
    timeout: float = Field(default=120.0, description="Request timeout in seconds")
    max_resources: int = Field(
        default=3,
        description="Maximum resources kept from a discovery response",
    )
    preparation_history_size: int = Field(
        default=3,
        description="Number of past sessions used to build preparation notes",
    )
