"""
User settings schemas.

Dependencies: pydantic
System role: Settings API contracts
"""

from typing import Literal

from pydantic import BaseModel, Field


class UserSettingsResponse(BaseModel):
    """Settings view; the API key is only ever returned masked."""

    claude_api_key: str | None = Field(description="Masked API key")
    claude_model: str
    analysis_prompt: str | None
    preparation_prompt: str | None
    has_api_key: bool


class UpdateApiConfigurationRequest(BaseModel):
    """Request schema for storing the Claude API key and model."""

    api_key: str = Field(min_length=1, description="Claude API key (stored encrypted)")
    model: str = Field(description="Claude model id")


class UpdateSystemPromptRequest(BaseModel):
    """Request schema for replacing the active analysis or preparation prompt."""

    type: Literal["analysis", "preparation"]
    prompt: str


class ClaudeModelOption(BaseModel):
    value: str
    label: str


class ClaudeModelsResponse(BaseModel):
    models: list[ClaudeModelOption]
    default: str
