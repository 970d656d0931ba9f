"""Domain entities."""
from .player import PlayerIdentity, AccountRecord
from .summoner import SummonerProfile, RankStanding, UNRANKED
from .match import MatchOutcomeTally
from .leaderboard_entry import LeaderboardEntry

__all__ = [
    'PlayerIdentity',
    'AccountRecord',
    'SummonerProfile',
    'RankStanding',
    'UNRANKED',
    'MatchOutcomeTally',
    'LeaderboardEntry',
]
