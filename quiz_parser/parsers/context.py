from __future__ import annotations

import logging
from dataclasses import dataclass, field

from quiz_parser.models import ClassProfile, get_profile
from quiz_parser.parsers.patterns import PatternBudget

_log = logging.getLogger("quiz_parser.diagnostics")


@dataclass
class ParseContext:
    """State for one parse call: class profile, time budget, diagnostics."""

    profile: ClassProfile
    budget: PatternBudget = field(default_factory=PatternBudget)
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def for_class(cls, document_class: str, budget_ms: int | None = None) -> ParseContext:
        return cls(profile=get_profile(document_class), budget=PatternBudget(budget_ms))

    @property
    def letters(self) -> str:
        return self.profile.letters

    def warn(self, message: str, *args) -> None:
        text = message % args if args else message
        _log.warning(text)
        self.warnings.append(text)
