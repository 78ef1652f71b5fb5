"""Tests for LLMClient (Claude API wrapper)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import pytest

from say_better.clients.llm_client import LLMClient, LLMResponse
from say_better.errors import (
    ConfigurationError,
    TransportError,
    UnexpectedFormatError,
    UpstreamAuthError,
    UpstreamGenericError,
    UpstreamPermissionError,
)

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _make_api_message(text: str, input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = [MagicMock(type="text", text=text)]
    return message


def _status_error(cls, status: int, message: str = "error"):
    return cls(message, response=httpx.Response(status, request=_REQUEST), body=None)


def _client_raising(mock_cls, exc) -> LLMClient:
    mock_client = MagicMock()
    mock_client.messages.create = AsyncMock(side_effect=exc)
    mock_cls.return_value = mock_client
    return LLMClient(api_key="test-key")


class TestLLMClientInit:
    def test_init_disables_sdk_retries(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient()
            mock_cls.assert_called_once_with(max_retries=0)

    def test_init_with_api_key_and_timeout(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(api_key="test-key", timeout=30.0)
            mock_cls.assert_called_once_with(max_retries=0, api_key="test-key", timeout=30.0)


class TestLLMClientGenerate:
    async def test_generate_returns_text(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=_make_api_message("Corrected: hi"))
            mock_cls.return_value = mock_client

            llm = LLMClient(api_key="test-key")
            result = await llm.generate("prompt")

        assert result == "Corrected: hi"

    async def test_complete_returns_usage(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(
                return_value=_make_api_message("hello", input_tokens=20, output_tokens=8)
            )
            mock_cls.return_value = mock_client

            llm = LLMClient(api_key="test-key")
            result = await llm.complete("prompt", model="claude-test")

        assert isinstance(result, LLMResponse)
        assert (result.input_tokens, result.output_tokens) == (20, 8)
        assert llm._token_log == [("claude-test", 20, 8)]

    async def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic"):
            llm = LLMClient()
            with pytest.raises(ConfigurationError):
                await llm.generate("prompt")

    async def test_no_text_block(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            message = _make_api_message("")
            message.content = []
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=message)
            mock_cls.return_value = mock_client

            llm = LLMClient(api_key="test-key")
            with pytest.raises(UnexpectedFormatError):
                await llm.generate("prompt")


class TestLLMClientErrors:
    async def test_authentication_error(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            llm = _client_raising(mock_cls, _status_error(anthropic.AuthenticationError, 401))
            with pytest.raises(UpstreamAuthError):
                await llm.generate("prompt")

    async def test_permission_error(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            llm = _client_raising(mock_cls, _status_error(anthropic.PermissionDeniedError, 403))
            with pytest.raises(UpstreamPermissionError):
                await llm.generate("prompt")

    async def test_other_status_error(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            llm = _client_raising(mock_cls, _status_error(anthropic.RateLimitError, 429, "slow down"))
            with pytest.raises(UpstreamGenericError) as exc_info:
                await llm.generate("prompt")
        assert exc_info.value.code == 429

    async def test_connection_error(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            llm = _client_raising(mock_cls, anthropic.APIConnectionError(request=_REQUEST))
            with pytest.raises(TransportError):
                await llm.generate("prompt")

    async def test_timeout_error(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            llm = _client_raising(mock_cls, anthropic.APITimeoutError(request=_REQUEST))
            with pytest.raises(TransportError):
                await llm.generate("prompt")


class TestLLMClientTokenSummary:
    def test_get_token_summary_returns_totals_and_clears(self):
        with patch("say_better.clients.llm_client.anthropic.AsyncAnthropic"):
            llm = LLMClient()
            llm._token_log = [("m", 100, 50), ("m", 200, 80)]

        summary = llm.get_token_summary()
        assert summary["input"] == 300
        assert summary["output"] == 130
        assert llm.get_token_summary()["calls"] == []
