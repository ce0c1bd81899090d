"""Tests for the command-line entry point."""
from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from quiz_parser.__main__ import _parse_flag, main


def _run(argv):
    with patch("sys.argv", ["quiz_parser", *argv]), \
         patch("quiz_parser.config.CONFIG_PATH", Path("/nonexistent/config.json")):
        main()


class TestParseFlag:
    def test_present(self):
        assert _parse_flag(["x", "--class", "reading"], "--class", "vocabulary") == "reading"

    def test_missing(self):
        assert _parse_flag(["x", "--class"], "--class", "vocabulary") == "vocabulary"


class TestParseCommand:
    def test_prints_outcome(self, tmp_path, capsys, vocab_doc):
        path = tmp_path / "quiz.txt"
        path.write_text(vocab_doc)
        _run(["parse", str(path)])
        out = json.loads(capsys.readouterr().out)
        assert out["document_class"] == "vocabulary"
        assert len(out["data"]) == 2

    def test_reading_class(self, tmp_path, capsys, reading_doc):
        path = tmp_path / "quiz.txt"
        path.write_text(reading_doc)
        _run(["parse", str(path), "--class", "reading"])
        out = json.loads(capsys.readouterr().out)
        assert len(out["data"]["questions"]) == 2

    def test_warnings_on_stderr(self, tmp_path, capsys):
        path = tmp_path / "quiz.txt"
        path.write_text("Q1. Where?\na) Lyon\nb) Paris\nAnswer: e")
        _run(["parse", str(path)])
        assert "does not match any option" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit):
            _run(["parse", str(tmp_path / "nope.txt")])

    def test_unknown_class(self, tmp_path):
        path = tmp_path / "quiz.txt"
        path.write_text("Q1. Hi?")
        with pytest.raises(SystemExit):
            _run(["parse", str(path), "--class", "grammar"])


class TestOtherCommands:
    def test_classes(self, capsys):
        _run(["classes"])
        out = capsys.readouterr().out
        assert "vocabulary" in out
        assert "reading" in out

    def test_config(self, capsys):
        _run(["config"])
        out = capsys.readouterr().out
        settings = json.loads(out.split("\n", 1)[1])
        assert settings["default_document_class"] == "vocabulary"
        assert settings["port"] == 8765

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            _run(["frobnicate"])
