"""Structured logging for slalom.

Store diagnostics (``json_file_empty``, ``json_file_malformed``, ...) are
structlog events. Until an application calls :func:`configure_logging`,
they are rendered to stderr by a default installed at import, so library
users never see them mixed into stdout.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from slalom.context import AppContext


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger so redirected streams are honoured
    return structlog.PrintLogger(sys.stderr)


def install_default_logging() -> None:
    """Send structlog output to stderr unless logging is already configured."""
    if not structlog.is_configured():
        structlog.configure(logger_factory=_stderr_logger_factory)


def reset_logging() -> None:
    """Drop any configuration and reinstall the stderr default (for testing)."""
    structlog.reset_defaults()
    install_default_logging()


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Path | None = None,
    colors: bool = True,
) -> None:
    """Route structlog through stdlib logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render events as JSON lines instead of console text
        log_file: Append to this file instead of writing to stderr
        colors: Colorize console output
    """
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    # force=True closes the handlers of any earlier configuration
    logging.basicConfig(
        format="%(message)s",
        handlers=[handler],
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=colors)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


def configure_from_context(context: AppContext, verbose: bool = False) -> None:
    """Configure logging from application context.

    Args:
        context: Application context with logging settings
        verbose: Force DEBUG level regardless of the configured level
    """
    level = "DEBUG" if verbose else context.log_level
    log_file = None
    if context.log_dir is not None:
        log_file = context.log_dir / "slalom.log"

    configure_logging(
        level=level,
        json_output=context.json_logs,
        log_file=log_file,
        colors=not context.json_logs and log_file is None,
    )


install_default_logging()
