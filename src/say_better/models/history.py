"""Pydantic model for a persisted rewrite."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from say_better.models.rewrite import RewriteResult


class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None  # assigned by the store on insert
    input_text: str
    tone: str = "Normal"
    corrected: str = ""
    professional: str = ""
    casual: str = ""
    genz: str = ""
    created_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_result(cls, input_text: str, tone: str, result: RewriteResult) -> HistoryEntry:
        return cls(input_text=input_text, tone=tone, **result.model_dump())

    @property
    def result(self) -> RewriteResult:
        return RewriteResult(
            corrected=self.corrected,
            professional=self.professional,
            casual=self.casual,
            genz=self.genz,
        )
