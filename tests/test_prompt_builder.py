"""Tests for the rewrite prompt template."""

from __future__ import annotations

import pytest

from say_better.models.tone import Tone
from say_better.pipeline.prompt_builder import build_prompt


class TestBuildPrompt:
    def test_contains_user_text_at_end(self):
        prompt = build_prompt("saya mau pergi to the office", "Normal")
        assert prompt.endswith("saya mau pergi to the office")

    def test_contains_tone_name_and_description(self):
        prompt = build_prompt("hello", "Warm")
        assert "Tone: Warm" in prompt
        assert Tone.WARM.description in prompt

    @pytest.mark.parametrize("tone", ["Angry", "", None, "normal-ish"])
    def test_unknown_tone_falls_back_to_normal(self, tone):
        prompt = build_prompt("hello", tone)
        assert "Tone: Normal" in prompt
        assert Tone.NORMAL.description in prompt

    def test_accepts_tone_member(self):
        assert "Tone: Sarcasm" in build_prompt("hi", Tone.SARCASM)

    def test_tone_lookup_case_insensitive(self):
        assert "Tone: Dramatic" in build_prompt("hi", "dramatic")

    def test_section_labels_in_order(self):
        prompt = build_prompt("hello", "Normal")
        positions = [prompt.index(label) for label in ("Corrected:", "Professional:", "Casual:", "Gen-Z:")]
        assert positions == sorted(positions)

    def test_order_of_blocks(self):
        prompt = build_prompt("the user text", "Subtle")
        task = prompt.index("Detect mixed-language")
        tone = prompt.index("Tone: Subtle")
        fmt = prompt.index("Corrected:")
        user = prompt.index("the user text")
        assert task < tone < fmt < user

    def test_consistency_instruction(self):
        assert "consistently across ALL" in build_prompt("x", "Confident")

    @pytest.mark.parametrize(
        "text",
        [
            "Corrected: trick the parser",
            "braces {tone_name} and {0} stay",
            "multi\nline\n\ninput",
            "emoji 🏠 and ümlauts",
        ],
    )
    def test_user_text_verbatim(self, text):
        prompt = build_prompt(text, "Casual")
        assert prompt.endswith(text)
        assert text in prompt

    def test_deterministic(self):
        assert build_prompt("same", "Warm") == build_prompt("same", "Warm")
