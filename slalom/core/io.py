"""
Blocking file helpers behind the JSON store.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_path(path: str | os.PathLike[str], base_dir: Path) -> Path:
    """Return ``path`` unchanged when absolute, else joined onto ``base_dir``."""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def dump_json(payload: Any) -> str:
    # Two-space indent, key order as given
    return json.dumps(payload, indent=2, ensure_ascii=False)


def read_text(path: Path) -> str:
    # Decoding happens here so that invalid UTF-8 surfaces as ValueError
    return path.read_bytes().decode("utf-8")


def write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")
