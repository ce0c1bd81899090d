from __future__ import annotations

from abc import ABC, abstractmethod


class UnsupportedFormat(Exception):
    def __init__(self, message: str, code: str = "UNSUPPORTED_FORMAT", hint: str | None = None):
        super().__init__(message)
        self.code = code
        self.hint = hint


class TextExtractor(ABC):
    """Turns an uploaded file into the plain text the parser reads."""

    @abstractmethod
    def extract(self, buffer: bytes, mime_type: str, file_name: str) -> str:
        ...

    @abstractmethod
    def name(self) -> str:
        ...
