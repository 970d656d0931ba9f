"""Application services root exports."""
from .aggregator import LeaderboardAggregator, avatar_url, opgg_url

__all__ = [
    "LeaderboardAggregator",
    "avatar_url",
    "opgg_url",
]
