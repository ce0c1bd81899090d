from __future__ import annotations

import logging

from quiz_parser.providers.base import TextExtractor, UnsupportedFormat

_log = logging.getLogger("quiz_parser.extract")

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"
TEXT_MIME = "text/plain"

SUPPORTED_MIME_TYPES = (DOCX_MIME, DOC_MIME, TEXT_MIME)
SUPPORTED_EXTENSIONS = (".docx", ".doc", ".txt")

PDF_HINT = (
    "Please convert your PDF to DOCX or TXT format, "
    "or enter the text content directly in the text input field."
)
UPLOAD_HINT = "Save the document as TXT, or paste its text into the text input field."


def is_supported_upload(mime_type: str, file_name: str) -> bool:
    """Upload check: DOCX, DOC and TXT by mime type or extension, never PDF."""
    name = (file_name or "").lower()
    if mime_type == PDF_MIME or name.endswith(".pdf"):
        return False
    return mime_type in SUPPORTED_MIME_TYPES or name.endswith(SUPPORTED_EXTENSIONS)


class PlainTextExtractor(TextExtractor):
    """Decodes text uploads; word-processor files need a converting extractor."""

    def extract(self, buffer: bytes, mime_type: str, file_name: str) -> str:
        name = (file_name or "").lower()

        if mime_type == PDF_MIME or name.endswith(".pdf"):
            raise UnsupportedFormat(
                "PDF file parsing is not currently supported.",
                code="PDF_NOT_SUPPORTED",
                hint=PDF_HINT,
            )

        if mime_type in (DOCX_MIME, DOC_MIME) or name.endswith((".docx", ".doc")):
            raise UnsupportedFormat(
                f"{self.name()} cannot read word-processor files ({file_name or mime_type}).",
                code="BINARY_DOCUMENT",
                hint=UPLOAD_HINT,
            )

        try:
            text = buffer.decode("utf-8-sig")
        except UnicodeDecodeError:
            _log.warning("Upload %r is not UTF-8 text (mime %s)", file_name, mime_type)
            raise UnsupportedFormat(
                f"Unsupported file format: {mime_type or 'unknown'}",
                hint=UPLOAD_HINT,
            ) from None

        if "\x00" in text:
            raise UnsupportedFormat(
                f"Unsupported file format: {mime_type or 'unknown'}",
                hint=UPLOAD_HINT,
            )
        return text.strip()

    def name(self) -> str:
        return "plain-text"
