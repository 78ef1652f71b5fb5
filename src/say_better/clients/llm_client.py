"""Claude API wrapper, the alternative text-generation provider."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import anthropic

from say_better.errors import (
    ConfigurationError,
    TransportError,
    UnexpectedFormatError,
    UpstreamAuthError,
    UpstreamGenericError,
    UpstreamPermissionError,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async Claude API client. SDK retries are disabled; errors are typed."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        *,
        default_model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ):
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self._has_key = bool(api_key or os.environ.get("ANTHROPIC_API_KEY"))
        self.default_model = default_model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def complete(self, prompt: str, model: str | None = None) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage."""
        if not self._has_key:
            raise ConfigurationError("ANTHROPIC_API_KEY is not set in environment.")

        model = model or self.default_model
        logger.debug("LLM call: model=%s", model)
        try:
            message = await self.client.messages.create(
                model=model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AuthenticationError as e:
            logger.error("Anthropic rejected the API key: %s", e.message)
            raise UpstreamAuthError() from e
        except anthropic.PermissionDeniedError as e:
            logger.error("Anthropic permission denied: %s", e.message)
            raise UpstreamPermissionError() from e
        except anthropic.APIStatusError as e:
            logger.error("Anthropic API error %d: %s", e.status_code, e.message)
            raise UpstreamGenericError(e.status_code, e.message) from e
        except anthropic.APIConnectionError as e:
            logger.error("LLM call failed", exc_info=True)
            raise TransportError(str(e)) from e

        text = next(
            (
                block.text
                for block in (message.content or [])
                if getattr(block, "type", None) == "text"
            ),
            None,
        )
        if not text:
            logger.error("Unexpected Claude response format: no text block")
            raise UnexpectedFormatError()

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))
        return LLMResponse(text=text, input_tokens=input_tokens, output_tokens=output_tokens)

    async def generate(self, prompt: str, model: str | None = None) -> str:
        response = await self.complete(prompt, model=model)
        return response.text

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
