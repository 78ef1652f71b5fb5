"""Rewrite flow: prompt, generate, parse, persist."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from pydantic import ValidationError

from say_better.clients.base import TextGenerator
from say_better.errors import SayBetterError
from say_better.history.history_store import HistoryStore
from say_better.models.history import HistoryEntry
from say_better.models.rewrite import DEFAULT_MODEL_ID, RewriteRequest, RewriteResult
from say_better.models.tone import Tone
from say_better.parsers.reply_parser import parse_reply
from say_better.pipeline.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

EMPTY_TEXT_MESSAGE = "Please enter some text to improve."
UNEXPECTED_ERROR_MESSAGE = "Internal server error calling the text-generation API."


@dataclass
class RewriteOutcome:
    """What the caller displays after one rewrite attempt."""

    result: RewriteResult
    request: RewriteRequest | None = None
    entry: HistoryEntry | None = None
    error: str | None = None
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


class Rewriter:
    """Runs one rewrite per call, sequentially, and never raises.

    Args:
        generator: Text-generation client.
        history: Optional store; results with content are appended to it.
        default_model: Model used when a call does not name one.
    """

    def __init__(
        self,
        generator: TextGenerator,
        history: HistoryStore | None = None,
        *,
        default_model: str = DEFAULT_MODEL_ID,
    ):
        self.generator = generator
        self.history = history
        self.default_model = default_model
        self.last_outcome: RewriteOutcome | None = None

    async def rewrite(
        self,
        text: str,
        tone: str | Tone | None = None,
        model_id: str | None = None,
    ) -> RewriteOutcome:
        start = time.monotonic()
        outcome = await self._run(text, tone, model_id or self.default_model)
        outcome.elapsed_seconds = time.monotonic() - start
        self.last_outcome = outcome
        return outcome

    async def _run(self, text: str, tone: str | Tone | None, model_id: str) -> RewriteOutcome:
        try:
            request = RewriteRequest(text=text or "", tone=tone, model_id=model_id)
        except ValidationError:
            return RewriteOutcome(result=RewriteResult(), error=EMPTY_TEXT_MESSAGE)

        prompt = build_prompt(request.text, request.tone)
        try:
            reply = await self.generator.generate(prompt, model=request.model_id)
        except SayBetterError as e:
            logger.warning("Rewrite failed: %s: %s", type(e).__name__, e.detail)
            return RewriteOutcome(result=RewriteResult(), request=request, error=e.user_message)
        except Exception:
            logger.exception("Unexpected error during rewrite")
            return RewriteOutcome(
                result=RewriteResult(), request=request, error=UNEXPECTED_ERROR_MESSAGE
            )

        result = parse_reply(reply)
        if not result.has_content:
            logger.info("Reply had no recognizable sections (%d chars)", len(reply))

        return RewriteOutcome(result=result, request=request, entry=self._save(request, result))

    def _save(self, request: RewriteRequest, result: RewriteResult) -> HistoryEntry | None:
        if self.history is None or not result.has_content:
            return None
        entry = HistoryEntry.from_result(request.text, request.tone, result)
        try:
            entry_id = self.history.append(entry)
        except Exception:
            logger.exception("Failed to save history entry")
            return None
        if entry_id is None:
            return None
        return entry.model_copy(update={"id": entry_id})
