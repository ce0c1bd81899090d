"""Find the answer key of a question block and strip it from the block."""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from quiz_parser.models import PROFILES, ClassProfile
from quiz_parser.parsers.patterns import PatternBudget, first_success

# Tried in this order; the key letter may sit in an opening parenthesis
# and must not run on into a word ("Answer: Berlin" has no key).
PHRASINGS = (
    ("correct answer", r"\bCorrect[ \t]+Answer[ \t]*:[ \t]*\(?(?P<key>[{L}])(?![a-z])"),
    ("answer", r"\bAnswer[ \t]*:[ \t]*\(?(?P<key>[{L}])(?![a-z])"),
    ("answer is", r"\bAnswer[ \t]+is[ \t]*:?[ \t]*\(?(?P<key>[{L}])(?![a-z])"),
    ("ans", r"\bAns\.?[ \t]*:[ \t]*\(?(?P<key>[{L}])(?![a-z])"),
    ("is correct", r"\((?P<key>[{L}])\)[ \t]*is[ \t]+correct\b"),
    ("correct", r"\bCorrect[ \t]*:[ \t]*\(?(?P<key>[{L}])(?![a-z])"),
)


@dataclass
class AnswerScan:
    answer: str | None
    residual: str


@lru_cache(maxsize=None)
def _compiled(letters: str) -> tuple[tuple[str, re.Pattern], ...]:
    return tuple(
        (label, re.compile(source.replace("{L}", letters), re.IGNORECASE))
        for label, source in PHRASINGS
    )


def _answer_start(line: str, letters: str) -> int | None:
    starts = []
    for _, pattern in _compiled(letters):
        m = pattern.search(line)
        if m:
            starts.append(m.start())
    return min(starts) if starts else None


def _strip_answer_lines(block: str, letters: str) -> str:
    kept = []
    for line in block.split("\n"):
        start = _answer_start(line, letters)
        if start is not None:
            # Keep whatever precedes the key on the same line ("c) Nice  Answer: B")
            line = line[:start].rstrip()
            if not line.strip():
                continue
        kept.append(line)
    return "\n".join(kept).strip()


def extract_answer(
    block: str,
    profile: ClassProfile = PROFILES["vocabulary"],
    budget: PatternBudget | None = None,
) -> AnswerScan:
    """Return the first answer key found and the block without answer lines.

    Every line carrying any of the phrasings is cut, not just the one
    that supplied the key.
    """
    strategies = [
        (label, lambda b, p=pattern: p.search(b))
        for label, pattern in _compiled(profile.letters)
    ]
    found = first_success(strategies, block, budget)
    answer = profile.normalize_answer(found[1].group("key")) if found else None
    return AnswerScan(answer=answer, residual=_strip_answer_lines(block, profile.letters))


def is_answer_line(line: str, letters: str = "abcde") -> bool:
    return _answer_start(line, letters) is not None
