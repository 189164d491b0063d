"""
AI integration layer: Claude client, prompt text and response parsers.
"""

from coachdesk.core.ai.claude_client import ClaudeClient, build_prompt
from coachdesk.core.ai.response_parsers import parse_resources, parse_tags
from coachdesk.core.ai.schemas import ParsedResource

__all__ = [
    "ClaudeClient",
    "ParsedResource",
    "build_prompt",
    "parse_resources",
    "parse_tags",
]
