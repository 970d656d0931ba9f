"""Application use cases."""
from .build_leaderboard import BuildLeaderboardUseCase

__all__ = ['BuildLeaderboardUseCase']
