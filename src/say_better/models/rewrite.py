"""Pydantic models for a single rewrite request and its parsed result."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from say_better.models.tone import Tone

DEFAULT_MODEL_ID = "gemini-flash-latest"


class RewriteRequest(BaseModel):
    text: str
    tone: str = Tone.NORMAL.label
    model_id: str = DEFAULT_MODEL_ID

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text must not be empty")
        return v

    @field_validator("tone", mode="before")
    @classmethod
    def _known_tone(cls, v: str | Tone | None) -> str:
        return Tone.resolve(v).label

    @field_validator("model_id", mode="before")
    @classmethod
    def _default_model(cls, v: str | None) -> str:
        return (v or "").strip() or DEFAULT_MODEL_ID


class RewriteResult(BaseModel):
    """The four variants extracted from a model reply. Absent sections stay empty."""

    model_config = ConfigDict(frozen=True)

    corrected: str = ""
    professional: str = ""
    casual: str = ""
    genz: str = ""

    @property
    def has_content(self) -> bool:
        return any((self.corrected, self.professional, self.casual, self.genz))


# Display order and labels of the four variants
VARIANT_LABELS: tuple[tuple[str, str], ...] = (
    ("corrected", "Corrected"),
    ("professional", "Professional"),
    ("casual", "Casual"),
    ("genz", "Gen-Z"),
)
