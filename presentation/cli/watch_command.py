from __future__ import annotations

import asyncio
import shutil
from typing import List, Optional, Sequence, Tuple

import httpx

from config import settings
from core.logging import get_logger
from presentation.leaderboard_view import COLUMNS, LeaderboardView, ViewState

_GREEN = "\033[92m"
_RED = "\033[91m"
_CYAN = "\033[96m"
_DIM = "\033[90m"
_RESET = "\033[0m"
_CLEAR = "\033[2J\033[H"


def format_table(rows: Sequence[Tuple[str, ...]], columns: Sequence[str] = COLUMNS) -> List[str]:
    """Lay rows out under ``columns``; single-cell rows span the table."""
    widths = [len(c) for c in columns]
    for row in rows:
        if len(row) == len(columns):
            widths = [max(w, len(cell)) for w, cell in zip(widths, row)]
    lines = ["  ".join(c.ljust(w) for c, w in zip(columns, widths)).rstrip()]
    lines.append("  ".join("─" * w for w in widths))
    for row in rows:
        if len(row) == len(columns):
            lines.append("  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())
        else:
            lines.append(" ".join(row))
    return lines


class WatchCommand:
    """Terminal presenter: polls the leaderboard endpoint and redraws."""

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        interval_s: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        base = url or f"http://{settings.HOST}:{settings.PORT}"
        self.endpoint = base.rstrip("/") + "/api/leaderboard"
        self.interval_s = interval_s if interval_s is not None else settings.REFRESH_INTERVAL_S
        self.transport = transport
        self.view = LeaderboardView()
        self._log = get_logger(__name__, service="watch-cli")

    async def poll_once(self, client: httpx.AsyncClient) -> LeaderboardView:
        try:
            response = await client.get(self.endpoint)
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            self._log.warning(lambda: f"poll failed: {exc}")
            self.view.apply_error(str(exc) or type(exc).__name__)
            return self.view
        if isinstance(payload, dict) and payload.get("error"):
            self.view.apply_error(str(payload["error"]))
        else:
            self.view.apply_payload(payload)
        return self.view

    def render(self) -> str:
        lines = format_table(self.view.rows())
        color = {ViewState.READY: "", ViewState.ERROR: _RED, ViewState.LOADING: _DIM}[self.view.state]
        cols = shutil.get_terminal_size(fallback=(100, 20)).columns
        header = f"{_GREEN}{'═' * min(cols, 96)}{_RESET}\n  {_CYAN}LoL Leaderboard{_RESET}  {_DIM}{self.endpoint}{_RESET}"
        body = "\n".join(f"  {color}{line}{_RESET}" if color else f"  {line}" for line in lines)
        return f"{header}\n{body}"

    async def run(self, *, once: bool = False) -> int:
        async with httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT, transport=self.transport) as client:
            if not once:
                print(_CLEAR + self.render(), flush=True)
            while True:
                await self.poll_once(client)
                print(("" if once else _CLEAR) + self.render(), flush=True)
                if once:
                    return 0 if self.view.state is ViewState.READY else 1
                await asyncio.sleep(self.interval_s)
