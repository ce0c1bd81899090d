"""Marker patterns shared by the parsers, plus the first-success combinator.

Each extraction step is a list of ``(label, strategy)`` pairs where a
strategy takes the text and returns a result or None. ``first_success``
walks the list and stops at the first result.

No pattern here nests quantifiers, so a single match is linear in the
length of the text. A running ``re`` match cannot be interrupted, so the
per-parse time budget is checked between strategy applications instead.
"""
from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TypeVar

_log = logging.getLogger("quiz_parser.patterns")

T = TypeVar("T")

# Keyword markers (Q1.  Question 2:  MCQ 3)) may sit anywhere in a line;
# bare numbers (1.  2)  3:) only count at the start of a line.
QUESTION_MARKER = re.compile(
    r"\b(?:Question|MCQ|Q)[ \t]*(?P<kw>\d+)[ \t]*[.:)]"
    r"|^[ \t]*(?P<bare>\d+)[.:)](?=\s|$)",
    re.IGNORECASE | re.MULTILINE,
)

# Option text that is really the start of another question
NUMBERED_PREFIX = re.compile(r"^(?:Question|MCQ|Q)[ \t]*\d+[ \t]*[.:)]", re.IGNORECASE)


def marker_number(match: re.Match) -> int:
    return int(match.group("kw") or match.group("bare"))


@lru_cache(maxsize=None)
def option_line_pattern(letters: str) -> re.Pattern:
    """A line that begins with an option marker such as ``a)`` or ``B. ``.

    A dot only counts when a blank follows, so ``A.D. 79`` is passage text.
    """
    return re.compile(
        rf"^[ \t]*(?P<key>[{letters}])(?:\)|\.(?=[ \t]|$))",
        re.IGNORECASE | re.MULTILINE,
    )


class PatternTimeout(Exception):
    """The parse spent its pattern budget before a strategy could run."""


@dataclass
class PatternBudget:
    limit_ms: int | None = None
    started: float = field(default_factory=time.monotonic)

    def elapsed_ms(self) -> float:
        return (time.monotonic() - self.started) * 1000

    def expired(self) -> bool:
        if not self.limit_ms:
            return False
        return self.elapsed_ms() > self.limit_ms

    def check(self, label: str) -> None:
        if self.expired():
            raise PatternTimeout(
                f"pattern budget of {self.limit_ms} ms spent before '{label}'"
            )


def first_success(
    strategies: Iterable[tuple[str, Callable[[str], T | None]]],
    text: str,
    budget: PatternBudget | None = None,
    on_timeout: Callable[[str], None] | None = None,
) -> tuple[str, T] | None:
    """Return ``(label, result)`` for the first strategy that finds something.

    A strategy skipped by the budget counts as having found nothing.
    """
    for label, strategy in strategies:
        try:
            if budget is not None:
                budget.check(label)
        except PatternTimeout as e:
            if on_timeout is not None:
                on_timeout(str(e))
            else:
                _log.warning("%s; treating it as no match", e)
            continue
        result = strategy(text)
        if result is not None:
            _log.debug("Strategy '%s' matched", label)
            return label, result
    return None
