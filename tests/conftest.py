"""Shared test fixtures."""
from __future__ import annotations

import pytest

from quiz_parser.parsers.context import ParseContext


@pytest.fixture
def vocab_ctx():
    return ParseContext.for_class("vocabulary")


@pytest.fixture
def reading_ctx():
    return ParseContext.for_class("reading")


@pytest.fixture
def vocab_doc():
    """Two numbered questions with differently phrased answer keys."""
    return (
        "Q1. Where does she live?\n"
        "a) Lyon\n"
        "b) Paris\n"
        "Correct Answer: B\n"
        "\n"
        "Q2. What is her job?\n"
        "a) Teacher\n"
        "b) Doctor\n"
        "Answer: A"
    )


@pytest.fixture
def reading_doc():
    """A labelled passage, a questions header and two numbered questions."""
    return """\
Reading Passage:
Marie lives in Paris with her family. She works at a hospital near the river.

MCQ Questions:
1. Where does Marie live?
A) Lyon
B) Paris
C) Nice
D) Lille
Answer: B

2. What is her job?
A. Teacher
B. Doctor
C. Baker
D. Nurse
Correct Answer: d
"""


@pytest.fixture
def unnumbered_doc():
    """Questions without numbering; each option list starts with a)."""
    return """\
Where does she live?
a) Lyon
b) Paris
Answer: b
What is her job?
a) Teacher
b) Doctor
c) Baker
"""
