"""Application configuration for slalom.

Settings are read from ``SLALOM_*`` environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Working directory at import, the default base for relative paths
_INITIAL_CWD = Path.cwd()


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


@dataclass
class AppContext:
    """Application context with all configuration."""

    # Directory relative document paths resolve against
    base_dir: Path

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_dir: Path | None = None

    @classmethod
    def from_env(cls, base_dir: Path | None = None) -> AppContext:
        """Load configuration from environment variables.

        Args:
            base_dir: Base directory (taken from SLALOM_BASE_DIR or the
                initial working directory if not provided)

        Returns:
            AppContext instance
        """
        if base_dir is None:
            base_dir = cls._detect_base_dir()

        log_dir = os.environ.get("SLALOM_LOG_DIR")

        return cls(
            base_dir=base_dir,
            log_level=os.environ.get("SLALOM_LOG_LEVEL", "INFO").strip().upper() or "INFO",
            json_logs=_env_flag(os.environ.get("SLALOM_LOG_JSON")),
            log_dir=Path(log_dir) if log_dir else None,
        )

    @staticmethod
    def _detect_base_dir() -> Path:
        """Detect the base directory from environment or initial working directory."""
        if base := os.environ.get("SLALOM_BASE_DIR"):
            return Path(base)
        return _INITIAL_CWD


_context: AppContext | None = None


def get_context() -> AppContext:
    """Get global application context.

    Returns:
        AppContext loaded from the environment on first call
    """
    global _context
    if _context is None:
        _context = AppContext.from_env()
    return _context


def reset_context() -> None:
    """Reset global context (for testing)."""
    global _context
    _context = None
