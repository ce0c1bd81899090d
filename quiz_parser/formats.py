"""Document-class adapters around the shared parsing pipeline.

Vocabulary quizzes come out as a flat list::

    [{"questionNumber": "Q1", "question": ..., "options": [{"key": "a", "text": ...}],
      "correctAnswer": "b"}]

Reading quizzes carry the passage and fixed option slots::

    {"passage": ..., "questions": [{"question": ..., "optionA": ..., ...,
                                    "correct_answer": "B"}]}
"""
from __future__ import annotations

import logging

from quiz_parser.models import ParsedQuestion, ParseOutcome, ReadingMaterial
from quiz_parser.parsers.assembler import assemble_all
from quiz_parser.parsers.boundary import resolve_boundary
from quiz_parser.parsers.context import ParseContext
from quiz_parser.parsers.segmenter import segment

_log = logging.getLogger("quiz_parser.formats")

READING_SLOTS = ("a", "b", "c", "d")


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse_questions(text: str, ctx: ParseContext) -> list[ParsedQuestion]:
    blocks = segment(_normalize_newlines(text), ctx)
    return assemble_all(blocks, ctx)


def parse_reading_material(text: str, ctx: ParseContext) -> ReadingMaterial:
    boundary = resolve_boundary(_normalize_newlines(text), ctx)
    return ReadingMaterial(
        passage=boundary.passage,
        questions=parse_questions(boundary.questions_region, ctx),
    )


def vocabulary_record(question: ParsedQuestion) -> dict:
    return {
        "questionNumber": f"Q{question.ordinal}",
        "question": question.question_text,
        "options": [o.to_dict() for o in question.options],
        "correctAnswer": question.correct_answer,
    }


def reading_record(question: ParsedQuestion) -> dict:
    # Keys past "d" have no slot in the reading layout
    slots = {o.key: o.text for o in question.options if o.key in READING_SLOTS}
    return {
        "question": question.question_text,
        "optionA": slots.get("a", ""),
        "optionB": slots.get("b", ""),
        "optionC": slots.get("c", ""),
        "optionD": slots.get("d", ""),
        "correct_answer": question.correct_answer or "",
    }


def parse_vocabulary(text: str, budget_ms: int | None = None) -> list[dict]:
    return parse_document(text, "vocabulary", budget_ms).data


def parse_reading(text: str, budget_ms: int | None = None) -> dict:
    return parse_document(text, "reading", budget_ms).data


def parse_document(text: str, document_class: str, budget_ms: int | None = None) -> ParseOutcome:
    """Parse one document of the given class.

    Raises ValueError only for an unknown document class; a document with
    nothing recognisable gives an empty result.
    """
    ctx = ParseContext.for_class(document_class, budget_ms)

    if document_class == "reading":
        material = parse_reading_material(text, ctx)
        data: list | dict = {
            "passage": material.passage,
            "questions": [reading_record(q) for q in material.questions],
        }
        count = len(material.questions)
    else:
        questions = parse_questions(text, ctx)
        data = [vocabulary_record(q) for q in questions]
        count = len(questions)

    _log.info(
        "Parsed %s document: %d questions, %d warnings",
        document_class, count, len(ctx.warnings),
    )
    return ParseOutcome(document_class=document_class, data=data, warnings=list(ctx.warnings))
