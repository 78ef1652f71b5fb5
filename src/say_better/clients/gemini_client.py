"""Gemini REST client (generateContent) over httpx."""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from say_better.errors import (
    ConfigurationError,
    SayBetterError,
    TransportError,
    UnexpectedFormatError,
    UpstreamAuthError,
    UpstreamGenericError,
    UpstreamPermissionError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-flash-latest"


class GeminiClient:
    """Async Gemini client. One request per call, no retries."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60,
        default_model: str = DEFAULT_MODEL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else os.environ.get("GEMINI_API_KEY")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_model = default_model
        self._transport = transport

    async def generate(self, prompt: str, model: str | None = None) -> str:
        """Send ``prompt`` to ``model`` and return the generated text."""
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set in environment.")

        model = model or self.default_model
        url = f"{self.base_url}/models/{model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.api_key}

        logger.debug("Gemini call: model=%s, prompt=%d chars", model, len(prompt))
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", type(e).__name__, exc_info=True)
            raise TransportError(f"{type(e).__name__}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Gemini returned non-JSON body (status %d)", response.status_code)
            raise UnexpectedFormatError() from e
        if not isinstance(data, dict):
            logger.error("Gemini returned a %s instead of an object", type(data).__name__)
            raise UnexpectedFormatError()

        if data.get("error"):
            raise self._map_error(data["error"], response.status_code)
        if response.is_error:
            logger.error("Gemini HTTP %d without error payload", response.status_code)
            raise UpstreamGenericError(response.status_code, response.reason_phrase)

        text = extract_text(data)
        if text is None:
            logger.error("Unexpected Gemini response format, keys: %s", sorted(data))
            raise UnexpectedFormatError()
        return text

    @staticmethod
    def _map_error(error: Any, status_code: int) -> SayBetterError:
        """Translate a Gemini ``error`` object into a typed error."""
        if not isinstance(error, dict):
            error = {"message": str(error)}
        message = str(error.get("message") or "Unknown error")
        code = error.get("code") or status_code
        status = str(error.get("status") or "")
        reasons = {
            str(d.get("reason", ""))
            for d in error.get("details") or []
            if isinstance(d, dict)
        }
        logger.error("Gemini API error %s (%s): %s", code, status or "-", message)

        if code == 401 or (
            code == 400
            and ("API_KEY_INVALID" in message or "API_KEY_INVALID" in reasons)
        ):
            return UpstreamAuthError()
        if code == 403 or status == "PERMISSION_DENIED" or "permission" in message.lower():
            return UpstreamPermissionError()
        return UpstreamGenericError(code, message)


def extract_text(data: dict) -> str | None:
    """Pull generated text out of a generateContent response, if present."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None
    if isinstance(text, str) and text:
        return text

    # Some models return the text at the top level
    text = data.get("text")
    if isinstance(text, str) and text:
        return text
    return None
