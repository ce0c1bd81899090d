"""FastAPI preview endpoints: text or an uploaded file in, parsed quiz out."""
from __future__ import annotations

import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from quiz_parser.config import Settings, load_settings
from quiz_parser.formats import parse_document
from quiz_parser.models import PROFILES
from quiz_parser.providers.base import TextExtractor, UnsupportedFormat
from quiz_parser.providers.plain_text import (
    PDF_HINT,
    UPLOAD_HINT,
    PlainTextExtractor,
    is_supported_upload,
)

app = FastAPI(title="Quiz Parser")

_settings: Settings | None = None
_log = logging.getLogger("quiz_parser.api")

NO_QUESTIONS_HINT = (
    "We could not find any questions in this document; "
    "please check the format (e.g. 'Q1. ...', 'a) ...', 'Correct Answer: B')."
)


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def _get_extractor() -> TextExtractor:
    return PlainTextExtractor()


@app.on_event("startup")
async def startup():
    global _settings
    if _settings is None:
        _settings = load_settings()


def _parse_response(text: str, document_class: str | None) -> dict:
    s = get_settings()
    document_class = document_class or s.default_document_class
    try:
        outcome = parse_document(text, document_class, budget_ms=s.pattern_budget_ms)
    except ValueError as e:
        raise HTTPException(400, str(e))

    payload = {"success": True, **outcome.to_dict()}
    if outcome.question_count == 0:
        payload["hint"] = NO_QUESTIONS_HINT
    return payload


@app.get("/api/document-classes")
async def api_document_classes():
    return {
        name: {
            "letters": list(profile.letters),
            "answer_case": "upper" if profile.answer_upper else "lower",
        }
        for name, profile in PROFILES.items()
    }


@app.post("/api/parse")
async def api_parse(request: Request):
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(400, "Request body must be JSON")
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")

    text = body.get("text") or ""
    document_class = body.get("document_class")
    if not isinstance(text, str) or not isinstance(document_class, (str, type(None))):
        raise HTTPException(400, "'text' and 'document_class' must be strings")
    if not text.strip():
        raise HTTPException(400, "No text provided")
    return _parse_response(text, document_class)


@app.post("/api/extract")
async def api_extract(request: Request, document_class: str | None = None):
    buffer = await request.body()
    if not buffer:
        raise HTTPException(400, "No file provided")

    file_name = request.headers.get("x-file-name", "")
    mime_type = request.headers.get("content-type", "").split(";")[0].strip()

    if not is_supported_upload(mime_type, file_name):
        if mime_type == "application/pdf" or file_name.lower().endswith(".pdf"):
            return JSONResponse(
                status_code=400,
                content={"error": "PDF files are not currently supported", "hint": PDF_HINT},
            )
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid file type. Upload a TXT file or paste the text directly",
                "hint": UPLOAD_HINT,
            },
        )

    extractor = _get_extractor()
    try:
        text = extractor.extract(buffer, mime_type, file_name)
    except UnsupportedFormat as e:
        _log.info("Extraction refused for %r: %s", file_name, e)
        return JSONResponse(
            status_code=400,
            content={"error": str(e), "code": e.code, "hint": e.hint},
        )

    return _parse_response(text, document_class)
