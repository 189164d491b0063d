"""
Supported Claude models.

Dependencies: None
System role: Model catalogue for settings validation and the settings UI
"""

CLAUDE_MODELS: list[dict[str, str]] = [
    {"value": "claude-opus-4-20250514", "label": "Claude Opus 4 (Latest)"},
    {"value": "claude-sonnet-4-20250514", "label": "Claude Sonnet 4"},
    {"value": "claude-3-7-sonnet-20250224", "label": "Claude 3.7 Sonnet"},
    {"value": "claude-3-5-sonnet-20241022", "label": "Claude 3.5 Sonnet"},
    {"value": "claude-3-5-haiku-20241022", "label": "Claude 3.5 Haiku"},
]

DEFAULT_CLAUDE_MODEL = "claude-opus-4-20250514"


def is_supported_model(model: str) -> bool:
    """Return True if model is one of CLAUDE_MODELS."""
    return any(m["value"] == model for m in CLAUDE_MODELS)
