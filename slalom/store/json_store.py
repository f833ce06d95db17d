"""Durable JSON document store.

Reads and writes whole JSON documents on disk without blocking the event
loop. Reads are forgiving: a missing file is created from the caller's
fallback, and an empty or corrupt file yields the fallback while leaving
the file alone. Every other I/O failure reaches the caller.

Usage:
    store = JsonStore(base_dir=Path("state"))
    settings = await store.read_json("settings.json", {"volume": 5})
    await store.write_json("settings.json", settings)
"""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Any

from slalom.context import get_context
from slalom.core.io import dump_json, ensure_dir, read_text, resolve_path, write_text
from slalom.logging_config import get_logger

logger = get_logger(__name__)

StrPath = str | os.PathLike[str]

# Marks "no fallback given" so that None (JSON null) stays a usable fallback
_MISSING: Any = object()


class JsonStore:
    """Reads and writes JSON documents relative to a base directory.

    Each instance owns its base directory, so independent stores can
    coexist. No locking is done: concurrent calls on the same path may
    interleave.
    """

    def __init__(self, base_dir: StrPath | None = None):
        """Initialize the store.

        Args:
            base_dir: Directory relative paths resolve against
                (defaults to the configured application base directory)
        """
        self._base_dir = Path(base_dir) if base_dir is not None else get_context().base_dir

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def set_base_dir(self, base_dir: StrPath) -> None:
        """Switch the directory used for later relative path resolution."""
        self._base_dir = Path(base_dir)
        logger.debug("json_store_base_dir_set", base_dir=str(self._base_dir))

    def resolve(self, path: StrPath) -> Path:
        return resolve_path(path, self._base_dir)

    async def read_json(self, path: StrPath, fallback: Any = _MISSING) -> Any:
        """Read a JSON document, seeding it with ``fallback`` when missing.

        Args:
            path: Document path, absolute or relative to the base directory
            fallback: Value returned when the document is missing, empty or
                malformed (defaults to a new empty dict)

        Returns:
            Parsed document, or ``fallback``

        Raises:
            OSError: On any I/O failure other than a missing file
        """
        if fallback is _MISSING:
            fallback = {}
        target = self.resolve(path)
        return await asyncio.to_thread(self._read_sync, target, path, fallback)

    async def write_json(self, path: StrPath, value: Any) -> None:
        """Write ``value`` as indented JSON, replacing the whole document.

        Args:
            path: Document path, absolute or relative to the base directory
            value: JSON-serializable value

        Raises:
            OSError: If the file cannot be written
            TypeError: If ``value`` is not JSON-serializable
        """
        target = self.resolve(path)
        await asyncio.to_thread(self._write_sync, target, value)

    def _read_sync(self, target: Path, path: StrPath, fallback: Any) -> Any:
        ensure_dir(target.parent)

        try:
            raw = read_text(target)
        except FileNotFoundError:
            write_text(target, dump_json(fallback))
            logger.info("json_file_seeded", path=str(path))
            return fallback
        except UnicodeDecodeError as exc:
            logger.error("json_file_malformed", path=str(path), error=str(exc))
            return fallback

        # A lone BOM counts as empty, as with whitespace
        if not raw.replace("\ufeff", "").strip():
            logger.warning("json_file_empty", path=str(path))
            return fallback

        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            # Left on disk as-is for inspection
            logger.error("json_file_malformed", path=str(path), error=str(exc))
            return fallback

    def _write_sync(self, target: Path, value: Any) -> None:
        text = dump_json(value)
        ensure_dir(target.parent)
        write_text(target, text)


# Process-wide default store behind the function-level API
_store: JsonStore | None = None


def get_store() -> JsonStore:
    """Get the global store.

    Returns:
        Global JsonStore instance (created on first call)
    """
    global _store
    if _store is None:
        _store = JsonStore()
    return _store


def reset_store() -> None:
    """Reset the global store (for testing)."""
    global _store
    _store = None


def set_base_dir(base_dir: StrPath) -> None:
    """Set the base directory of the global store."""
    get_store().set_base_dir(base_dir)


def get_base_dir() -> Path:
    return get_store().base_dir


async def read_json(path: StrPath, fallback: Any = _MISSING) -> Any:
    """Read a JSON document through the global store."""
    return await get_store().read_json(path, fallback)


async def write_json(path: StrPath, value: Any) -> None:
    """Write a JSON document through the global store."""
    await get_store().write_json(path, value)
