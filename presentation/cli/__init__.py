"""Presentation CLI exports."""
from .fetch_command import FetchCommand
from .watch_command import WatchCommand, format_table

__all__ = [
    "FetchCommand",
    "WatchCommand",
    "format_table",
]
