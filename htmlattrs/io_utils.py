"""Utility helpers for document IO and diagnostics."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, indent=2) + "\n"


def read_document(path: Path) -> Any:
    """Load a JSON or YAML document; ``.json`` files use the JSON parser."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
