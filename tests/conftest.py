"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from say_better.clients.base import TextGenerator
from say_better.history.history_store import SQLiteHistoryStore
from say_better.models.rewrite import RewriteResult

CANONICAL_REPLY = (
    "Corrected:\nShe is going home.\n\n"
    "Professional:\nShe is returning home at this time.\n\n"
    "Casual:\nShe's heading home.\n\n"
    "Gen-Z:\nbestie she out here going home fr 🏠"
)


@pytest.fixture
def canonical_reply() -> str:
    return CANONICAL_REPLY


@pytest.fixture
def canonical_result() -> RewriteResult:
    return RewriteResult(
        corrected="She is going home.",
        professional="She is returning home at this time.",
        casual="She's heading home.",
        genz="bestie she out here going home fr 🏠",
    )


@pytest.fixture
def mock_generator() -> TextGenerator:
    """A text generator that answers with the canonical reply."""
    generator = AsyncMock(spec=TextGenerator)
    generator.generate = AsyncMock(return_value=CANONICAL_REPLY)
    return generator


@pytest.fixture
def history_store(tmp_path) -> SQLiteHistoryStore:
    return SQLiteHistoryStore(db_path=tmp_path / "history.db")
