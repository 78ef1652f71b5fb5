"""Split a labeled model reply into the four rewrite variants.

The reply is read line by line through a small state machine whose state
is the section currently being filled. A section label starts (or
restarts) a section; other non-blank lines are folded into the active
section with single spaces. Text before the first label is ignored.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import reduce
from typing import NamedTuple

from say_better.models.rewrite import RewriteResult


class Section(str, Enum):
    NONE = "none"
    CORRECTED = "corrected"
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    GENZ = "genz"


SECTION_PREFIXES: tuple[tuple[Section, re.Pattern[str]], ...] = (
    (Section.CORRECTED, re.compile(r"^corrected:\s*", re.IGNORECASE)),
    (Section.PROFESSIONAL, re.compile(r"^professional:\s*", re.IGNORECASE)),
    (Section.CASUAL, re.compile(r"^casual:\s*", re.IGNORECASE)),
    (Section.GENZ, re.compile(r"^gen-?z:\s*", re.IGNORECASE)),
)


class ParseState(NamedTuple):
    current: Section = Section.NONE
    texts: tuple[tuple[Section, str], ...] = ()

    def text_of(self, section: Section) -> str:
        return dict(self.texts).get(section, "")

    def with_text(self, section: Section, text: str) -> ParseState:
        texts = dict(self.texts)
        texts[section] = text
        return ParseState(section, tuple(texts.items()))


def match_prefix(line: str) -> tuple[Section, str] | None:
    """Return the section a line opens and the text after its label."""
    for section, pattern in SECTION_PREFIXES:
        m = pattern.match(line)
        if m:
            return section, line[m.end():].strip()
    return None


def step(state: ParseState, raw_line: str) -> ParseState:
    """Advance the parser by one line."""
    line = raw_line.strip()

    opened = match_prefix(line)
    if opened is not None:
        section, rest = opened
        return state.with_text(section, rest)

    if state.current is Section.NONE or not line:
        return state

    previous = state.text_of(state.current)
    return state.with_text(state.current, f"{previous} {line}" if previous else line)


def parse_reply(reply: str) -> RewriteResult:
    """Parse a model reply into a RewriteResult. Never raises."""
    final = reduce(step, (reply or "").split("\n"), ParseState())
    return RewriteResult(
        corrected=final.text_of(Section.CORRECTED),
        professional=final.text_of(Section.PROFESSIONAL),
        casual=final.text_of(Section.CASUAL),
        genz=final.text_of(Section.GENZ),
    )
