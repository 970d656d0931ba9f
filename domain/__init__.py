"""Domain layer - Entities, enums, errors and stage results."""
from .entities import (
    PlayerIdentity, AccountRecord, SummonerProfile, RankStanding,
    MatchOutcomeTally, LeaderboardEntry,
)
from .enums import Region, RegionRouting, QueueType, Rank
from .errors import LeaderboardError, MissingCredentialError, UnsupportedRegionError, UpstreamError
from .results import StageResult

__all__ = [
    # Entities
    'PlayerIdentity',
    'AccountRecord',
    'SummonerProfile',
    'RankStanding',
    'MatchOutcomeTally',
    'LeaderboardEntry',
    # Enums
    'Region',
    'RegionRouting',
    'QueueType',
    'Rank',
    # Errors
    'LeaderboardError',
    'MissingCredentialError',
    'UnsupportedRegionError',
    'UpstreamError',
    # Results
    'StageResult',
]
