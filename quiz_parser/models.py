from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassProfile:
    name: str
    letters: str  # option alphabet, lower-case
    answer_upper: bool  # reading keys are stored upper-case

    def normalize_answer(self, key: str) -> str:
        return key.upper() if self.answer_upper else key.lower()


PROFILES = {
    "vocabulary": ClassProfile("vocabulary", "abcde", answer_upper=False),
    "reading": ClassProfile("reading", "abcd", answer_upper=True),
}


def get_profile(document_class: str) -> ClassProfile:
    try:
        return PROFILES[document_class]
    except KeyError:
        raise ValueError(
            f"Unknown document class: {document_class!r} "
            f"(expected one of {', '.join(PROFILES)})"
        ) from None


@dataclass
class Option:
    key: str
    text: str

    def to_dict(self) -> dict:
        return {"key": self.key, "text": self.text}


@dataclass
class QuestionBlock:
    ordinal: int
    text: str


@dataclass
class ParsedQuestion:
    ordinal: int
    question_text: str
    options: list[Option]
    correct_answer: str | None = None

    @property
    def option_keys(self) -> list[str]:
        return [o.key for o in self.options]


@dataclass
class ReadingMaterial:
    passage: str
    questions: list[ParsedQuestion] = field(default_factory=list)


@dataclass
class ParseOutcome:
    document_class: str
    data: list | dict
    warnings: list[str] = field(default_factory=list)

    @property
    def question_count(self) -> int:
        if isinstance(self.data, dict):
            return len(self.data.get("questions", []))
        return len(self.data)

    def to_dict(self) -> dict:
        return {
            "document_class": self.document_class,
            "data": self.data,
            "warnings": self.warnings,
        }
