"""Closed table of emotional tones interpolated into the rewrite prompt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ToneDescriptor:
    name: str
    description: str


class Tone(Enum):
    """Every tone the prompt understands. Unknown names resolve to NORMAL."""

    NORMAL = ToneDescriptor(
        "Normal",
        "Neutral and natural. No added emotion; just clear, correct English.",
    )
    CASUAL = ToneDescriptor(
        "Casual",
        "Relaxed and easygoing, like talking to a friend or a close colleague.",
    )
    WARM = ToneDescriptor(
        "Warm",
        "Kind, friendly and caring. The reader should feel welcomed and appreciated.",
    )
    DRAMATIC = ToneDescriptor(
        "Dramatic",
        "Expressive and intense, with heightened emotion and vivid wording.",
    )
    CONFIDENT = ToneDescriptor(
        "Confident",
        "Assertive and self-assured. Direct statements, no hedging or apologies.",
    )
    THOUGHTFUL = ToneDescriptor(
        "Thoughtful",
        "Reflective and considerate, showing care for nuance and the reader's view.",
    )
    SUBTLE = ToneDescriptor(
        "Subtle",
        "Understated and gentle. Emotion is implied rather than stated outright.",
    )
    SARCASM = ToneDescriptor(
        "Sarcasm",
        "Dry and ironic, saying the opposite of what is meant for playful effect.",
    )

    @property
    def label(self) -> str:
        return self.value.name

    @property
    def description(self) -> str:
        return self.value.description

    @classmethod
    def resolve(cls, name: str | Tone | None) -> Tone:
        """Look up a tone by display name, case-insensitively."""
        if isinstance(name, Tone):
            return name
        key = str(name or "").strip().lower()
        for tone in cls:
            if tone.value.name.lower() == key:
                return tone
        return cls.NORMAL


DEFAULT_TONE = Tone.NORMAL
TONE_NAMES: tuple[str, ...] = tuple(tone.label for tone in Tone)
