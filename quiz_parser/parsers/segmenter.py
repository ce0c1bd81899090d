"""Split a questions region into one block per question.

Numbered documents (``Q1.``, ``1.``, ``Question 1:``, ``MCQ 1)``) are cut at
each marker. Documents without numbering fall back to cutting where a new
option list starts.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache

from quiz_parser.models import QuestionBlock
from quiz_parser.parsers.answers import extract_answer, is_answer_line
from quiz_parser.parsers.context import ParseContext
from quiz_parser.parsers.options import extract_options, is_option_line
from quiz_parser.parsers.patterns import QUESTION_MARKER, first_success, marker_number

_log = logging.getLogger("quiz_parser.segmenter")

MIN_UNNUMBERED_OPTIONS = 2


@lru_cache(maxsize=None)
def _first_marker_pattern(letters: str) -> re.Pattern:
    return re.compile(rf"^[ \t]*{letters[0]}(?:\)|\.(?=[ \t]|$))", re.IGNORECASE)


def _numbered_blocks(region: str, ctx: ParseContext) -> list[QuestionBlock] | None:
    markers = list(QUESTION_MARKER.finditer(region))
    if not markers:
        return None

    by_number: dict[int, QuestionBlock] = {}
    for i, m in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(region)
        number = marker_number(m)
        if number in by_number:
            ctx.warn(
                "Question number %d appears more than once; the later block replaces the earlier one",
                number,
            )
        by_number[number] = QuestionBlock(ordinal=number, text=region[m.end():end].strip())

    return sorted(by_number.values(), key=lambda b: b.ordinal)


def _split_at_option_lists(lines: list[str], letters: str) -> list[str]:
    """Cut before each ``a)`` line that follows a finished option list.

    Non-option lines seen after an option list are held back and travel
    with the next block as its question text, unless another option of
    the current list turns up (a wrapped option line).
    """
    first = _first_marker_pattern(letters)
    chunks: list[str] = []
    current: list[str] = []
    pending: list[str] = []
    has_options = False

    for line in lines:
        if has_options and first.match(line):
            chunks.append("\n".join(current))
            current, pending = pending, []
            has_options = False
        if is_option_line(line, letters):
            current.extend(pending)
            pending = []
            current.append(line)
            has_options = True
        elif pending or (has_options and line.strip() and not is_answer_line(line, letters)):
            pending.append(line)
        else:
            current.append(line)

    chunks.append("\n".join(current + pending))
    return chunks


def _unnumbered_blocks(region: str, ctx: ParseContext) -> list[QuestionBlock] | None:
    letters = ctx.letters
    lines = region.split("\n")
    first = _first_marker_pattern(letters)
    if any(first.match(line) for line in lines):
        chunks = _split_at_option_lists(lines, letters)
    else:
        # Options written inline; one question per paragraph
        chunks = re.split(r"\n[ \t]*\n", region)

    blocks: list[QuestionBlock] = []
    for chunk in chunks:
        chunk = chunk.strip()
        if not chunk:
            continue
        residual = extract_answer(chunk, ctx.profile).residual
        if len(extract_options(residual, letters)) < MIN_UNNUMBERED_OPTIONS:
            _log.debug("Skipping unnumbered chunk without enough options: %r", chunk[:60])
            continue
        blocks.append(QuestionBlock(ordinal=len(blocks) + 1, text=chunk))
    return blocks or None


def segment(region: str, ctx: ParseContext | None = None) -> list[QuestionBlock]:
    ctx = ctx or ParseContext.for_class("vocabulary")
    if not region.strip():
        return []
    strategies = [
        ("numbered", lambda r: _numbered_blocks(r, ctx)),
        ("unnumbered", lambda r: _unnumbered_blocks(r, ctx)),
    ]
    found = first_success(strategies, region, ctx.budget, on_timeout=ctx.warn)
    if found is None:
        return []
    label, blocks = found
    _log.debug("Segmented %d blocks using '%s' strategy", len(blocks), label)
    return blocks
