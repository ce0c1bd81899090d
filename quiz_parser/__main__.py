"""CLI entry point for quiz-parser.

Usage:
  python -m quiz_parser serve [--host HOST] [--port PORT]
  python -m quiz_parser parse FILE [--class vocabulary|reading] [--budget-ms N]
  python -m quiz_parser classes
  python -m quiz_parser config
"""
from __future__ import annotations

import json
import sys
from pathlib import Path


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "parse":
        _parse(args[1:])
    elif command == "classes":
        _classes()
    elif command == "config":
        _config()
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, parse, classes, config")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str | None) -> str | None:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _serve(args: list[str]):
    import uvicorn

    from quiz_parser.config import load_settings

    settings = load_settings()
    port = int(_parse_flag(args, "--port", str(settings.port)))
    host = _parse_flag(args, "--host", settings.host)

    print(f"Starting Quiz Parser on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    uvicorn.run(
        "quiz_parser.app:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level,
    )


def _parse(args: list[str]):
    from quiz_parser.config import load_settings
    from quiz_parser.formats import parse_document
    from quiz_parser.providers.base import UnsupportedFormat
    from quiz_parser.providers.plain_text import PlainTextExtractor

    positional = [a for i, a in enumerate(args)
                  if not a.startswith("--") and (i == 0 or not args[i - 1].startswith("--"))]
    if not positional:
        print("Usage: python -m quiz_parser parse FILE [--class vocabulary|reading] [--budget-ms N]")
        sys.exit(1)

    path = Path(positional[0])
    if not path.exists():
        print(f"File not found: {path}")
        sys.exit(1)

    settings = load_settings()
    document_class = _parse_flag(args, "--class", settings.default_document_class)
    budget_ms = int(_parse_flag(args, "--budget-ms", str(settings.pattern_budget_ms)))

    try:
        text = PlainTextExtractor().extract(path.read_bytes(), "", path.name)
    except UnsupportedFormat as e:
        print(f"Cannot read {path.name}: {e}")
        if e.hint:
            print(e.hint)
        sys.exit(1)

    try:
        outcome = parse_document(text, document_class, budget_ms=budget_ms)
    except ValueError as e:
        print(e)
        sys.exit(1)

    print(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False))
    for warning in outcome.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    if outcome.question_count == 0:
        print("No questions found; check the document format.", file=sys.stderr)


def _classes():
    from quiz_parser.models import PROFILES

    for name, profile in PROFILES.items():
        case = "upper" if profile.answer_upper else "lower"
        print(f"  {name:<12} options {', '.join(profile.letters)}  answers {case}-case")


def _config():
    from quiz_parser.config import CONFIG_PATH, load_settings

    print(f"# {CONFIG_PATH}")
    print(json.dumps(load_settings().to_dict(), indent=2))


if __name__ == "__main__":
    main()
