from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "default_document_class": "vocabulary",
    "pattern_budget_ms": 2000,
    "host": "127.0.0.1",
    "port": 8765,
    "log_level": "info",
}


@dataclass
class Settings:
    default_document_class: str = DEFAULTS["default_document_class"]
    pattern_budget_ms: int = DEFAULTS["pattern_budget_ms"]  # 0 disables the budget
    host: str = DEFAULTS["host"]
    port: int = DEFAULTS["port"]
    log_level: str = DEFAULTS["log_level"]

    def to_dict(self) -> dict:
        return {
            "default_document_class": self.default_document_class,
            "pattern_budget_ms": self.pattern_budget_ms,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()

