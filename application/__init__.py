"""Application layer - Aggregator and use cases."""
from .services import LeaderboardAggregator
from .use_cases import BuildLeaderboardUseCase

__all__ = [
    'LeaderboardAggregator',
    'BuildLeaderboardUseCase',
]
