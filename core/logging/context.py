from __future__ import annotations

import contextvars
import uuid
from typing import Any, Dict

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def new_cycle_id() -> str:
    return uuid.uuid4().hex[:8]


class context(object):
    """Bind values into every record logged inside the ``with`` block.

    Values are stored in a contextvar, so tasks spawned inside the block
    (the per-match fan-out) inherit them.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token = None

    def __enter__(self):
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb):
        if self._token is not None:
            _context.reset(self._token)
        return False
