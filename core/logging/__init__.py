"""Structured logging: handlers, formatters and a contextvar-bound context."""
from .config import bootstrap_logging, shutdown_logging
from .context import context, get_context, new_cycle_id
from .logger import StructuredLogger, get_logger, LogLevel

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "context",
    "get_context",
    "new_cycle_id",
    "StructuredLogger",
    "get_logger",
    "LogLevel",
]
