"""Turn question blocks into ParsedQuestion records."""
from __future__ import annotations

import logging
import re

from quiz_parser.models import ParsedQuestion, QuestionBlock
from quiz_parser.parsers.answers import extract_answer
from quiz_parser.parsers.context import ParseContext
from quiz_parser.parsers.options import OptionScan, is_option_line, scan_options

_log = logging.getLogger("quiz_parser.assembler")


def _remove_spans(text: str, spans: list[tuple[int, int]]) -> str:
    for start, end in sorted(spans, reverse=True):
        text = text[:start] + " " + text[end:]
    return text


def _question_text(residual: str, scan: OptionScan | None, letters: str) -> str:
    if scan is not None:
        text = _remove_spans(residual, scan.spans)
    else:
        # No option survived; still keep stray marker lines out of the question
        text = "\n".join(line for line in residual.split("\n") if not is_option_line(line, letters))
    return re.sub(r"\s+", " ", text).strip()


def _first_plain_line(residual: str, letters: str) -> str:
    for line in residual.split("\n"):
        if line.strip() and not is_option_line(line, letters):
            return line.strip()
    return ""


def assemble(block: QuestionBlock, ctx: ParseContext | None = None) -> ParsedQuestion | None:
    """Build one question, or None when the block holds nothing usable."""
    ctx = ctx or ParseContext.for_class("vocabulary")
    letters = ctx.letters

    answer = extract_answer(block.text, ctx.profile, ctx.budget)
    scan = scan_options(answer.residual, letters, ctx.budget)
    options = scan.options if scan else []

    question_text = _question_text(answer.residual, scan, letters)
    if not question_text:
        question_text = _first_plain_line(answer.residual, letters)

    if not question_text and not options:
        _log.debug("Dropping block %d: no question text and no options", block.ordinal)
        return None
    if not question_text:
        ctx.warn("Question %d has options but no question text", block.ordinal)

    question = ParsedQuestion(
        ordinal=block.ordinal,
        question_text=question_text,
        options=options,
        correct_answer=answer.answer,
    )
    keys = question.option_keys
    if question.correct_answer is not None and question.correct_answer.lower() not in keys:
        ctx.warn(
            "Question %d: correct answer '%s' does not match any option (%s)",
            block.ordinal, question.correct_answer, ", ".join(keys) or "none",
        )
    return question


def assemble_all(blocks: list[QuestionBlock], ctx: ParseContext | None = None) -> list[ParsedQuestion]:
    ctx = ctx or ParseContext.for_class("vocabulary")
    questions = []
    for block in blocks:
        question = assemble(block, ctx)
        if question is not None:
            questions.append(question)
    return sorted(questions, key=lambda q: q.ordinal)
