"""
Claude chat client.

Sends a single-turn prompt to Anthropic Claude through LangChain using the
calling user's own API key and model, and maps SDK failures to
user-facing AIServiceError messages.

Dependencies: langchain_anthropic, langchain_core, anthropic
System role: Outbound LLM boundary for session analysis
"""

import logging

import anthropic
from langchain_anthropic import ChatAnthropic
from langchain_core.messages import BaseMessage, HumanMessage

from coachdesk.configs import get_settings
from coachdesk.core.exceptions import AIServiceError
from coachdesk.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


def build_prompt(instructions: str, transcript: str, context: str | None = None) -> str:
    """
    Assemble the prompt sent for one analysis component.

    Args:
        instructions: Component instructions (summary, email, custom prompt...)
        transcript: Session transcript or client history
        context: Combined context documents, omitted when empty

    Returns:
        str: Prompt text
    """
    context_block = f"CONTEXT INFORMATION:\n{context}\n\n" if context else ""
    return f"\n{context_block}\n{instructions}\n\nSession Transcript:\n{transcript}\n"


def _message_text(message: BaseMessage) -> str:
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class ClaudeClient:
    """Thin async wrapper around ChatAnthropic for one-shot completions."""

    def __init__(self, max_tokens: int | None = None, timeout: float | None = None) -> None:
        """
        Initialize client defaults.

        Args:
            max_tokens: Completion token limit (defaults to CLAUDE_MAX_TOKENS)
            timeout: Request timeout in seconds (defaults to CLAUDE_TIMEOUT)
        """
        settings = get_settings().llm
        self._max_tokens = max_tokens or settings.max_tokens
        self._timeout = timeout or settings.timeout

    def _build_model(self, api_key: str, model: str) -> ChatAnthropic:
        return ChatAnthropic(
            model=model,
            api_key=api_key,
            max_tokens=self._max_tokens,
            timeout=self._timeout,
            max_retries=0,
        )

    async def complete(self, prompt: str, api_key: str, model: str) -> str:
        """
        Send prompt as a single user message and return the reply text.

        Args:
            prompt: Full prompt text
            api_key: Decrypted Claude API key
            model: Claude model id

        Returns:
            str: Reply text (may be empty)

        Raises:
            AIServiceError: If the API rejects the call or is unreachable
        """
        llm = self._build_model(api_key, model)
        try:
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except anthropic.AuthenticationError as e:
            logger.warning("Claude rejected API key", extra={"model": model})
            raise AIServiceError(
                "Invalid API key. Please check your Claude API key in settings.",
                status_code=e.status_code,
            ) from e
        except anthropic.RateLimitError as e:
            logger.warning("Claude rate limit hit", extra={"model": model})
            raise AIServiceError(
                "Rate limit exceeded. Please try again in a moment.",
                status_code=e.status_code,
            ) from e
        except anthropic.BadRequestError as e:
            logger.warning("Claude rejected request", extra={"model": model, "error": safe_log_value(e)})
            raise AIServiceError(
                "Invalid request. Please check your settings and try again.",
                status_code=e.status_code,
            ) from e
        except anthropic.APIStatusError as e:
            logger.error(
                "Claude API error",
                extra={"model": model, "status_code": e.status_code, "error": safe_log_value(e)},
            )
            raise AIServiceError(f"API error: {e.status_code}", status_code=e.status_code) from e
        except anthropic.APIConnectionError as e:
            logger.error("Failed to reach Claude API", extra={"model": model, "error": safe_log_value(e)})
            raise AIServiceError(
                "Failed to connect to Claude API. Please check your internet connection."
            ) from e

        text = _message_text(response)
        logger.debug(
            "Claude completion received",
            extra={"model": model, "prompt_chars": len(prompt), "response_chars": len(text)},
        )
        return text
