"""
Durable JSON store.

Provides async read/write of whole JSON documents with fallback seeding
and tolerance for empty or corrupt files.
"""

from slalom.store.json_store import (
    JsonStore,
    get_base_dir,
    get_store,
    read_json,
    reset_store,
    set_base_dir,
    write_json,
)

__all__ = [
    "JsonStore",
    "get_base_dir",
    "get_store",
    "read_json",
    "reset_store",
    "set_base_dir",
    "write_json",
]
