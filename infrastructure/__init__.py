"""Infrastructure layer - API client and repositories."""
from .api import RiotAPIClient
from .repositories import MatchRepository, SummonerRepository

__all__ = [
    'RiotAPIClient',
    'MatchRepository',
    'SummonerRepository',
]
