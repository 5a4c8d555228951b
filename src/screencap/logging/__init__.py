"""Logging module for screencap."""

from .logger import LogContext, get_logger, mark_logging_initialized, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "mark_logging_initialized",
    "LogContext",
]
