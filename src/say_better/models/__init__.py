"""Data models for the rewrite pipeline."""

from say_better.models.contact import ContactMessage
from say_better.models.history import HistoryEntry
from say_better.models.rewrite import (
    DEFAULT_MODEL_ID,
    VARIANT_LABELS,
    RewriteRequest,
    RewriteResult,
)
from say_better.models.tone import DEFAULT_TONE, TONE_NAMES, Tone, ToneDescriptor

__all__ = [
    "ContactMessage",
    "DEFAULT_MODEL_ID",
    "DEFAULT_TONE",
    "HistoryEntry",
    "RewriteRequest",
    "RewriteResult",
    "TONE_NAMES",
    "VARIANT_LABELS",
    "Tone",
    "ToneDescriptor",
]
