"""Prompt template for the mixed-language rewrite request."""

from __future__ import annotations

from say_better.models.tone import Tone

REWRITE_PROMPT = """\
You are an English Technical Writer AI.

Tasks:
1. Detect mixed-language sentences (for example Indonesian mixed with English).
2. Translate every non-English part to natural English.
3. Fix all grammar issues and make the sentence clear and natural.

Tone: {tone_name}
Tone description: {tone_description}
Apply the {tone_name} tone consistently across ALL of the variations below.

Return exactly this structure, with the labels in this order and nothing else:

Corrected:
<corrected, natural, clear sentence>

Professional:
<more formal / business version>

Casual:
<slightly relaxed, conversational version>

Gen-Z:
<Gen-Z version with trendy slang and emoji>

Write exactly one variant under each label.

User input:
"""


def build_prompt(text: str, tone: str | Tone | None = None) -> str:
    """Build the rewrite prompt for ``text`` in the given tone.

    Unknown tones fall back to Normal. ``text`` is appended verbatim and
    is never passed through ``str.format``, so braces or section labels in
    user input cannot change the template.
    """
    resolved = Tone.resolve(tone)
    header = REWRITE_PROMPT.format(
        tone_name=resolved.label,
        tone_description=resolved.description,
    )
    return header + text
