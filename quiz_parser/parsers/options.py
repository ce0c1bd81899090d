"""Recover the labelled options of one question block.

Authors write options in several ways::

    a) Lyon  b) Paris  c) Nice      (same line)
    a) Lyon                         (one per line)
    A. Lyon
    A.Lyon B.Paris                  (no space after the dot)

Three pattern families are tried in order and the first one that yields
a valid option wins. Keys are normalised to lower case; the first valid
text for a key wins and later duplicates are dropped.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache

from quiz_parser.models import Option
from quiz_parser.parsers.patterns import (
    NUMBERED_PREFIX,
    PatternBudget,
    first_success,
    option_line_pattern,
)

_log = logging.getLogger("quiz_parser.options")

MIN_OPTION_LENGTH = 2


@dataclass
class OptionScan:
    options: list[Option]
    spans: list[tuple[int, int]] = field(default_factory=list)
    family: str = ""


@lru_cache(maxsize=None)
def _inline_pattern(letters: str) -> re.Pattern:
    # ")" always delimits; "." only when followed by whitespace, so "a.m." is not a marker
    marker = rf"[{letters}](?:\)|\.(?=\s))"
    return re.compile(
        rf"(?<![\w.(])(?P<key>[{letters}])(?:\)|\.(?=\s))[ \t]*"
        rf"(?P<text>[^\n]*?)"
        rf"(?=[ \t]+{marker}|[ \t]*(?:\n|\Z))",
        re.IGNORECASE,
    )


@lru_cache(maxsize=None)
def _upper_pattern(letters: str) -> re.Pattern:
    upper = letters.upper()
    marker = rf"(?<![\w.(])[{upper}][).]"
    return re.compile(
        rf"(?<![\w.(])(?P<key>[{upper}])[).][ \t]*"
        rf"(?P<text>[^\n]*?)"
        rf"(?=[ \t]*{marker}|[ \t]*(?:\n|\Z))"
    )


@lru_cache(maxsize=None)
def _line_pattern(letters: str) -> re.Pattern:
    return re.compile(
        rf"^[ \t]*(?P<key>[{letters}])[).][ \t]*(?P<text>[^\n]*?)[ \t]*$",
        re.IGNORECASE | re.MULTILINE,
    )


@lru_cache(maxsize=None)
def _fragment_patterns(letters: str) -> tuple[re.Pattern, re.Pattern]:
    trailing = re.compile(rf"[ \t]+[{letters}]\)$", re.IGNORECASE)
    leading = re.compile(rf"^[{letters}][).][ \t]*", re.IGNORECASE)
    return trailing, leading


def _clean_text(text: str, letters: str) -> str:
    trailing, leading = _fragment_patterns(letters)
    text = trailing.sub("", text.strip())
    return leading.sub("", text).strip()


def _is_noise(text: str) -> bool:
    return len(text) < MIN_OPTION_LENGTH or bool(NUMBERED_PREFIX.match(text))


def _at_line_start(block: str, pos: int) -> bool:
    return not block[block.rfind("\n", 0, pos) + 1:pos].strip()


def _collect(
    pattern: re.Pattern,
    block: str,
    letters: str,
    family: str,
    anchored_dots: bool = False,
) -> OptionScan | None:
    options: list[Option] = []
    spans: list[tuple[int, int]] = []
    seen: set[str] = set()
    last_end: int | None = None

    for m in pattern.finditer(block):
        start = m.start("key")
        line_start = _at_line_start(block, start)
        # Mid-line "B." is a sentence ending unless it continues a row of options
        if anchored_dots and not line_start and block[m.end("key")] == ".":
            gap = block[last_end:start] if last_end is not None else "\n"
            if gap.strip(" \t"):
                continue
        last_end = m.end()

        key = m.group("key").lower()
        text = _clean_text(m.group("text"), letters)
        if _is_noise(text):
            if line_start:
                spans.append((start, m.end()))
            continue
        spans.append((start, m.end()))
        if key in seen:
            _log.debug("Duplicate option '%s' ignored: %r", key, text)
            continue
        seen.add(key)
        options.append(Option(key=key, text=text))

    if not options:
        return None
    return OptionScan(options=options, spans=spans, family=family)


def scan_options(
    block: str,
    letters: str = "abcde",
    budget: PatternBudget | None = None,
) -> OptionScan | None:
    """Options plus the spans of the winning family's marker matches."""
    strategies = [
        ("inline", lambda b: _collect(
            _inline_pattern(letters), b, letters, "inline", anchored_dots=True)),
        ("inline-upper", lambda b: _collect(_upper_pattern(letters), b, letters, "inline-upper")),
        ("line", lambda b: _collect(_line_pattern(letters), b, letters, "line")),
    ]
    found = first_success(strategies, block, budget)
    return found[1] if found else None


def extract_options(
    block: str,
    letters: str = "abcde",
    budget: PatternBudget | None = None,
) -> list[Option]:
    scan = scan_options(block, letters, budget)
    return scan.options if scan else []


def is_option_line(line: str, letters: str = "abcde") -> bool:
    return bool(option_line_pattern(letters).match(line))
