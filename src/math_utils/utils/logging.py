"""Structured logging configuration built on structlog."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from math_utils.utils.settings import get_settings

if TYPE_CHECKING:
    from math_utils.utils.settings import LoggingSettings


def _shared_processors() -> list[Any]:
    """Return the processors common to every output format."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _select_renderer(log_format: str) -> Any:
    """Return the final structlog processor for the configured format."""
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "plain":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "event"],
        )
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure stdlib logging and structlog from the logging settings.

    Log records are written to stderr so that command output on stdout stays
    machine readable. When ``log_file_path`` is set, records are also
    appended to that file.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file_path:
        handlers.append(logging.FileHandler(settings.log_file_path, encoding="utf-8"))

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[*_shared_processors(), _select_renderer(settings.log_format)],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def _ensure_stdlib_backend() -> None:
    """Route structlog through stdlib logging until the application configures it.

    Without this, structlog writes every record to stdout, including DEBUG.
    Stdlib logging drops records below WARNING and sends the rest to stderr
    when no handler is installed.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[*_shared_processors(), _select_renderer("console")],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound with the given initial values."""
    _ensure_stdlib_backend()
    return structlog.get_logger(name, **initial_values)


__all__ = ["configure_logging", "get_logger"]
