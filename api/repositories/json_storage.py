"""
JSON file persistence for the collections.

Each collection lives in its own file as one JSON array, rewritten as a
whole after every mutation.
"""

from __future__ import annotations

from pathlib import Path
import json


class StorageError(Exception):
    """Backing file exists but cannot be read as a JSON array."""

    def __init__(self, path, reason: str):
        super().__init__(f"Cannot load collection from {path}: {reason}")
        self.path = path
        self.reason = reason


def load_collection(path: Path) -> list:
    if not path.exists():
        return []
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise StorageError(path, str(exc)) from exc
    if not isinstance(data, list):
        raise StorageError(path, f"expected a JSON array, got {type(data).__name__}")
    return data


def save_collection(path: Path, records: list) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
