"""Structured logging configuration for screencap using structlog.

All log output goes to stderr (or a log file) so that stdout stays reserved
for the capture paths the CLI prints.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
    add_timestamp: bool = True,
    add_caller_info: bool = False,
    colorize: bool = True,
) -> None:
    """Configure structured logging for screencap.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        structured: Use JSON structured output
        console: Enable console output (overridden by SCREENCAP_DISABLE_CONSOLE_LOGGING env var)
        add_timestamp: Add timestamps to logs
        add_caller_info: Add caller information
        colorize: Colorize console output (only for non-structured)
    """
    if os.getenv("SCREENCAP_DISABLE_CONSOLE_LOGGING") == "1":
        console = False
        log_file = None

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if add_caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize and console))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    # Nothing to write to: suppress output entirely
    if not handlers:
        handlers.append(logging.NullHandler())
        level = "CRITICAL"

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )


# Global state for lazy initialization
_logging_initialized = False


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    global _logging_initialized

    if _logging_initialized:
        return

    if os.getenv("SCREENCAP_DISABLE_CONSOLE_LOGGING") == "1":
        logging.disable(logging.CRITICAL)
        _logging_initialized = True
        return

    level = os.getenv("SCREENCAP_LOG_LEVEL", "WARNING")
    if not isinstance(logging.getLevelName(level.upper()), int):
        level = "WARNING"

    settings_error: ValueError | None = None
    try:
        if get_settings().debug_mode:
            level = "DEBUG"
    except ValueError as e:
        settings_error = e

    setup_logging(level=level, structured=False)
    _logging_initialized = True

    if settings_error is not None:
        structlog.get_logger(__name__).warning("settings_unreadable", error=str(settings_error))


def mark_logging_initialized() -> None:
    """Record that logging was configured explicitly (e.g. by the CLI)."""
    global _logging_initialized
    _logging_initialized = True


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.BoundLogger, structlog.get_logger(name))


class LogContext:
    """Context manager for temporary log context."""

    def __init__(self, logger: structlog.BoundLogger, **kwargs) -> None:
        """Initialize with logger and context.

        Args:
            logger: Logger instance
            **kwargs: Context key-value pairs
        """
        self.logger = logger
        self.context = kwargs

    def __enter__(self) -> structlog.BoundLogger:
        """Enter context and bind values."""
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context; the bound logger simply goes out of scope."""
        pass
