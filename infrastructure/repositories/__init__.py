"""Infrastructure repositories."""
from .match_repository import MatchRepository, outcome_for
from .summoner_repository import SummonerRepository, standing_from_entries

__all__ = [
    'MatchRepository',
    'SummonerRepository',
    'outcome_for',
    'standing_from_entries',
]
