"""Presentation layer - Web app, terminal watcher and shared view rules."""
from .leaderboard_view import LeaderboardView, ViewState, win_rate, sort_entries

__all__ = [
    "LeaderboardView",
    "ViewState",
    "win_rate",
    "sort_entries",
]
