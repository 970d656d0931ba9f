from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .logger import register_levels, to_level

_listener: QueueListener | None = None

# Third-party loggers that log every request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


def bootstrap_logging(
    *,
    service: str = "app",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "app.jsonl",
    console: Optional[bool] = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Install console and JSON-lines file handlers on the root logger.

    Console output is off unless ``console`` is passed or ``LOG_CONSOLE=true``.
    File records go through a queue so request handlers never block on disk.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        handler = logging.StreamHandler()
        handler.setLevel(to_level(console_level_str) if console_level_str else lvl)
        handler.setFormatter(ConsoleFormatter())
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count)
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        root.addHandler(QueueHandler(q))
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))

    logging.getLogger(__name__).debug("logging ready", extra={"service": service})


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
