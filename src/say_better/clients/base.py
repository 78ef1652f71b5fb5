"""Text-generation collaborator interface and provider factory."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from say_better.config import LLMConfig


@runtime_checkable
class TextGenerator(Protocol):
    """Anything that turns a prompt into generated text.

    Implementations raise ``say_better.errors.SayBetterError`` subclasses
    and never retry on their own.
    """

    async def generate(self, prompt: str, model: str | None = None) -> str:
        ...


def create_text_generator(config: LLMConfig) -> TextGenerator:
    """Build the client for the configured provider."""
    if config.provider == "anthropic":
        from say_better.clients.llm_client import LLMClient

        return LLMClient(
            timeout=config.timeout,
            default_model=config.anthropic_model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    from say_better.clients.gemini_client import GeminiClient

    return GeminiClient(
        base_url=config.base_url,
        timeout=config.timeout,
        default_model=config.model,
    )
