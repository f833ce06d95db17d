"""
Core primitives for slalom.
"""

from .io import dump_json, ensure_dir, read_text, resolve_path, write_text

__all__ = [
    "dump_json",
    "ensure_dir",
    "read_text",
    "resolve_path",
    "write_text",
]
