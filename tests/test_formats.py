"""End-to-end tests for the document-class adapters."""
from __future__ import annotations

import pytest

from quiz_parser.formats import (
    parse_document,
    parse_reading,
    parse_vocabulary,
    reading_record,
    vocabulary_record,
)
from quiz_parser.models import Option, ParsedQuestion


class TestVocabulary:
    def test_end_to_end(self, vocab_doc):
        questions = parse_vocabulary(vocab_doc)
        assert len(questions) == 2
        assert [q["questionNumber"] for q in questions] == ["Q1", "Q2"]
        assert [q["correctAnswer"] for q in questions] == ["b", "a"]
        assert questions[0]["question"] == "Where does she live?"
        assert questions[0]["options"] == [
            {"key": "a", "text": "Lyon"},
            {"key": "b", "text": "Paris"},
        ]

    def test_idempotent(self, vocab_doc):
        assert parse_vocabulary(vocab_doc) == parse_vocabulary(vocab_doc)

    def test_windows_line_endings(self, vocab_doc):
        assert parse_vocabulary(vocab_doc.replace("\n", "\r\n")) == parse_vocabulary(vocab_doc)

    def test_unnumbered_document(self, unnumbered_doc):
        questions = parse_vocabulary(unnumbered_doc)
        assert [q["questionNumber"] for q in questions] == ["Q1", "Q2"]
        assert questions[0]["correctAnswer"] == "b"
        assert questions[1]["correctAnswer"] is None
        assert len(questions[1]["options"]) == 3

    def test_no_question_limit(self):
        text = "\n".join(
            f"Q{n}. Question number {n}?\na) First choice\nb) Second choice\nAnswer: a"
            for n in range(1, 13)
        )
        questions = parse_vocabulary(text)
        assert len(questions) == 12
        assert questions[-1]["questionNumber"] == "Q12"

    def test_dropped_block_leaves_no_gap(self):
        questions = parse_vocabulary("Q1.\nQ2. What is her job?\na) Teacher\nb) Doctor")
        assert len(questions) == 1
        assert questions[0]["questionNumber"] == "Q2"

    def test_sentence_final_capital(self):
        questions = parse_vocabulary("Q1. She got an A. Was she happy?\na) Yes, very\nb) No, not at all")
        assert questions[0]["question"] == "She got an A. Was she happy?"
        assert questions[0]["options"][0] == {"key": "a", "text": "Yes, very"}

    def test_empty_text(self):
        assert parse_vocabulary("") == []
        assert parse_vocabulary("Nothing to see here") == []


class TestReading:
    def test_end_to_end(self, reading_doc):
        result = parse_reading(reading_doc)
        assert "Marie lives in Paris" in result["passage"]
        assert len(result["questions"]) == 2

        first = result["questions"][0]
        assert first == {
            "question": "Where does Marie live?",
            "optionA": "Lyon",
            "optionB": "Paris",
            "optionC": "Nice",
            "optionD": "Lille",
            "correct_answer": "B",
        }
        assert result["questions"][1]["optionD"] == "Nurse"
        assert result["questions"][1]["correct_answer"] == "D"

    def test_passage_split(self):
        result = parse_reading("Some prose.\n\nQ1. What colour is the sky?\na) Blue\nb) Green")
        assert result["passage"] == "Some prose."
        assert result["questions"][0]["question"] == "What colour is the sky?"
        assert result["questions"][0]["correct_answer"] == ""

    def test_empty_text(self):
        assert parse_reading("") == {"passage": "", "questions": []}


class TestRecords:
    def test_reading_record_ignores_keys_past_d(self):
        q = ParsedQuestion(
            ordinal=1,
            question_text="Pick",
            options=[Option("a", "One"), Option("e", "Five"), Option("c", "Three")],
            correct_answer=None,
        )
        record = reading_record(q)
        assert record["optionA"] == "One"
        assert record["optionB"] == ""
        assert record["optionC"] == "Three"
        assert "Five" not in record.values()
        assert record["correct_answer"] == ""

    def test_vocabulary_record(self):
        q = ParsedQuestion(4, "Pick", [Option("a", "One")], "a")
        assert vocabulary_record(q) == {
            "questionNumber": "Q4",
            "question": "Pick",
            "options": [{"key": "a", "text": "One"}],
            "correctAnswer": "a",
        }


class TestParseDocument:
    def test_unknown_class(self):
        with pytest.raises(ValueError, match="Unknown document class"):
            parse_document("Q1. Hi?", "grammar")

    def test_outcome_carries_warnings(self):
        outcome = parse_document("Q1. Where?\na) Lyon\nb) Paris\nAnswer: d", "vocabulary")
        assert outcome.question_count == 1
        assert len(outcome.warnings) == 1
        assert outcome.to_dict()["document_class"] == "vocabulary"

    def test_reading_outcome_count(self, reading_doc):
        outcome = parse_document(reading_doc, "reading")
        assert outcome.question_count == 2
        assert outcome.warnings == []
