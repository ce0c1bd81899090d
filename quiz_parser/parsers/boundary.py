"""Separate the reading passage from the questions that follow it.

Heuristics, tried in order:

1. the first question-numbering marker (``Q1.``, ``1.``, ``Question 1:``...)
2. the first line that starts with an option marker (``a)``, ``A.``...)
3. a passage label (``Reading Passage:``, ``Passage:``, ``Text:``,
   ``Paragraph:``) followed later by ``MCQ`` / ``Question`` / ``Q``
4. the middle of the text
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from quiz_parser.parsers.context import ParseContext
from quiz_parser.parsers.patterns import QUESTION_MARKER, first_success, option_line_pattern

_log = logging.getLogger("quiz_parser.boundary")

SECTION_HEADERS = [
    re.compile(r"Reading Passage:", re.IGNORECASE),
    re.compile(r"Passage:", re.IGNORECASE),
    re.compile(r"Text:", re.IGNORECASE),
    re.compile(r"Paragraph:", re.IGNORECASE),
]
QUESTIONS_KEYWORD = re.compile(r"\b(?:MCQ|Questions?|Q)\b", re.IGNORECASE)

# "MCQ Questions:" on its own line right before the boundary
_HEADER_TAIL = re.compile(
    r"(?:^|\n)[ \t]*(?P<header>(?:MCQ[ \t]+)?Questions?[ \t]*:?)\s*\Z",
    re.IGNORECASE,
)
_REGION_PREFIX = re.compile(
    r"^\s*(?:MCQ\s+)?Questions?(?![ \t]*\d)[ \t]*:?\s*",
    re.IGNORECASE,
)


@dataclass
class Boundary:
    passage: str
    questions_region: str
    strategy: str
    offset: int = 0


def _at_question_marker(text: str) -> int | None:
    m = QUESTION_MARKER.search(text)
    return m.start() if m else None


def _at_option_line(letters: str):
    def find(text: str) -> int | None:
        m = option_line_pattern(letters).search(text)
        return m.start() if m else None
    return find


def _after_section_header(text: str) -> int | None:
    for header in SECTION_HEADERS:
        h = header.search(text)
        if not h:
            continue
        keyword = QUESTIONS_KEYWORD.search(text, h.end())
        if keyword:
            return keyword.start()
    return None


def _pull_back_header(text: str, offset: int) -> int:
    tail = _HEADER_TAIL.search(text[:offset])
    return tail.start("header") if tail else offset


def resolve_boundary(text: str, ctx: ParseContext | None = None) -> Boundary:
    ctx = ctx or ParseContext.for_class("reading")
    if not text.strip():
        return Boundary(passage="", questions_region="", strategy="empty")

    strategies = [
        ("question-marker", _at_question_marker),
        ("option-line", _at_option_line(ctx.letters)),
        ("section-header", _after_section_header),
    ]
    found = first_success(strategies, text, ctx.budget, on_timeout=ctx.warn)
    if found is None:
        label, offset = "midpoint", len(text) // 2
        ctx.warn("No question boundary found; splitting the document at its midpoint")
    else:
        label, offset = found
        if label != "section-header":
            offset = _pull_back_header(text, offset)

    _log.debug("Passage boundary at %d via '%s'", offset, label)
    region = _REGION_PREFIX.sub("", text[offset:], count=1).strip()
    return Boundary(
        passage=text[:offset].strip(),
        questions_region=region,
        strategy=label,
        offset=offset,
    )
