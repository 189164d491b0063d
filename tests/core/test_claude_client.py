"""
Test suite for ClaudeClient and prompt assembly.

ChatAnthropic is patched; anthropic SDK errors are built from httpx
requests/responses so the status-code mapping is exercised end to end.

System role: Verification of the outbound LLM boundary
"""

from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import pytest
from langchain_core.messages import AIMessage, HumanMessage

from coachdesk.core.ai.claude_client import ClaudeClient, build_prompt
from coachdesk.core.exceptions import AIServiceError

REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _status_error(cls, status_code: int):
    response = httpx.Response(status_code, request=REQUEST)
    return cls("boom", response=response, body=None)


@pytest.fixture
def mock_llm() -> MagicMock:
    """Provide a ChatAnthropic stand-in."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content="Session went well."))
    return llm


@pytest.fixture
def claude(mock_llm: MagicMock):
    """Provide ClaudeClient with ChatAnthropic patched."""
    with patch("coachdesk.core.ai.claude_client.ChatAnthropic", return_value=mock_llm) as chat_cls:
        client = ClaudeClient(max_tokens=4000, timeout=30)
        client.chat_cls = chat_cls
        yield client


class TestBuildPrompt:
    """Test suite for build_prompt()."""

    def test_should_include_context_block_when_present(self) -> None:
        prompt = build_prompt("Summarize.", "Coach: hi", "Company values")

        assert prompt == (
            "\nCONTEXT INFORMATION:\nCompany values\n\n"
            "\nSummarize.\n\nSession Transcript:\nCoach: hi\n"
        )

    def test_should_omit_context_block_when_empty(self) -> None:
        prompt = build_prompt("Summarize.", "Coach: hi", "")

        assert prompt == "\n\nSummarize.\n\nSession Transcript:\nCoach: hi\n"
        assert "CONTEXT INFORMATION" not in prompt


class TestClaudeClientComplete:
    """Test suite for ClaudeClient.complete()."""

    @pytest.mark.asyncio
    async def test_complete_should_return_reply_text(self, claude, mock_llm) -> None:
        # Act
        text = await claude.complete("prompt", "sk-ant-key", "claude-sonnet-4-20250514")

        # Assert
        assert text == "Session went well."
        messages = mock_llm.ainvoke.call_args.args[0]
        assert len(messages) == 1
        assert isinstance(messages[0], HumanMessage)
        assert messages[0].content == "prompt"

    @pytest.mark.asyncio
    async def test_complete_should_use_callers_key_and_model(self, claude) -> None:
        await claude.complete("prompt", "sk-ant-key", "claude-3-5-haiku-20241022")

        kwargs = claude.chat_cls.call_args.kwargs
        assert kwargs["api_key"] == "sk-ant-key"
        assert kwargs["model"] == "claude-3-5-haiku-20241022"
        assert kwargs["max_tokens"] == 4000

    @pytest.mark.asyncio
    async def test_complete_should_join_text_blocks(self, claude, mock_llm) -> None:
        mock_llm.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Part one. "}, {"type": "text", "text": "Part two."}]
        )

        text = await claude.complete("prompt", "key", "model")

        assert text == "Part one. Part two."

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error, message",
        [
            (
                _status_error(anthropic.AuthenticationError, 401),
                "Invalid API key. Please check your Claude API key in settings.",
            ),
            (
                _status_error(anthropic.RateLimitError, 429),
                "Rate limit exceeded. Please try again in a moment.",
            ),
            (
                _status_error(anthropic.BadRequestError, 400),
                "Invalid request. Please check your settings and try again.",
            ),
            (_status_error(anthropic.InternalServerError, 500), "API error: 500"),
        ],
    )
    async def test_complete_should_map_status_errors(self, claude, mock_llm, error, message) -> None:
        # Arrange
        mock_llm.ainvoke.side_effect = error

        # Act / Assert
        with pytest.raises(AIServiceError) as exc_info:
            await claude.complete("prompt", "key", "model")
        assert exc_info.value.message == message

    @pytest.mark.asyncio
    async def test_complete_should_map_connection_errors(self, claude, mock_llm) -> None:
        mock_llm.ainvoke.side_effect = anthropic.APIConnectionError(request=REQUEST)

        with pytest.raises(AIServiceError) as exc_info:
            await claude.complete("prompt", "key", "model")

        assert exc_info.value.message == (
            "Failed to connect to Claude API. Please check your internet connection."
        )
