from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# ``extra=`` keys the pipeline attaches to records.
_EXTRA_FIELDS = ("stage", "status", "match_id", "url", "latency_ms", "error", "count")


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


def _record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: getattr(record, k) for k in _EXTRA_FIELDS if getattr(record, k, None) is not None}


class ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        md = _record_metadata(record)
        lvl = record.levelname
        parts = [
            md["timestamp"],
            lvl,
            md["service"] or "-",
            f"{md['logger']}:{md['function']}:{md['line_number']}",
            record.getMessage(),
        ]
        extras = _record_extras(record)
        if extras:
            parts.append(" ".join(f"{k}={v}" for k, v in extras.items()))
        ctx = get_context()
        if ctx:
            parts.append(f"{ctx}")
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        return f"{_LEVEL_COLORS.get(lvl, '')}{' | '.join(parts)}{_RESET}"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _record_metadata(record)
        payload["message"] = record.getMessage()
        payload.update(_record_extras(record))
        ctx = get_context()
        if ctx:
            payload["context"] = ctx
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
