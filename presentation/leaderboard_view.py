"""Display rules shared by the browser page and the terminal watcher."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from domain.entities import LeaderboardEntry

COLUMNS: Tuple[str, ...] = ("#", "Player", "Account", "Rank", "Games", "W", "L", "WR", "OP.GG")
PLACEHOLDER = "—"


def win_rate(wins: int, games: int) -> int:
    """Whole-percent win rate; 0 when no games were counted.

    Rounds half up, so 12.5% shows as 13%.
    """
    if games <= 0:
        return 0
    return int(math.floor(wins / games * 100 + 0.5))


def sort_entries(entries: Iterable[LeaderboardEntry]) -> List[LeaderboardEntry]:
    return sorted(entries, key=lambda e: e.rank)


def row_cells(entry: LeaderboardEntry) -> Tuple[str, ...]:
    account = f"{entry.game_name}#{entry.tag_line}" if entry.tag_line else PLACEHOLDER
    return (
        str(entry.rank),
        entry.game_name,
        account,
        f"{entry.tier} ({entry.lp} LP)",
        str(entry.games),
        str(entry.wins),
        str(entry.losses),
        f"{win_rate(entry.wins, entry.games)}%",
        entry.opgg_url or PLACEHOLDER,
    )


class ViewState(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class LeaderboardView:
    """
    Presenter state for one board.

    Starts in LOADING; every poll result replaces the previous one, whatever
    order the responses arrive in.
    """

    state: ViewState = ViewState.LOADING
    entries: List[LeaderboardEntry] = field(default_factory=list)
    error: Optional[str] = None

    def apply_payload(self, payload: Any) -> None:
        if not isinstance(payload, list):
            self.apply_error("API did not return a list")
            return
        try:
            entries = [LeaderboardEntry.from_dict(item) for item in payload]
        except (AttributeError, TypeError, ValueError) as exc:
            self.apply_error(f"malformed entry: {exc}")
            return
        self.state = ViewState.READY
        self.entries = sort_entries(entries)
        self.error = None

    def apply_error(self, message: str) -> None:
        self.state = ViewState.ERROR
        self.entries = []
        self.error = message

    def rows(self) -> List[Tuple[str, ...]]:
        if self.state is ViewState.LOADING:
            return [("Loading…",)]
        if self.state is ViewState.ERROR:
            return [(f"Error: {self.error}",)]
        return [row_cells(e) for e in self.entries]
