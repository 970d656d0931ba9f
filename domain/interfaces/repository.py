"""Repository interfaces for the aggregation stages."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import AccountRecord, SummonerProfile, RankStanding
from ..enums import QueueType, RegionRouting
from ..results import StageResult


class ISummonerRepository(ABC):
    """Account, profile and league lookups."""

    @abstractmethod
    async def resolve_account(
        self, routing: RegionRouting, game_name: str, tag_line: str
    ) -> StageResult[AccountRecord]:
        """Resolve a Riot ID to its account."""

    @abstractmethod
    async def resolve_profile(self, routing: RegionRouting, puuid: str) -> StageResult[SummonerProfile]:
        """Get the platform profile of an account."""

    @abstractmethod
    async def resolve_rank_standing(
        self, routing: RegionRouting, summoner_id: Optional[str], queue_type: QueueType
    ) -> StageResult[RankStanding]:
        """Get the standing in one ranked queue."""


class IMatchRepository(ABC):
    """Match history lookups."""

    @abstractmethod
    async def resolve_match_ids(
        self, routing: RegionRouting, puuid: str, queue_type: QueueType, count: int
    ) -> StageResult[List[str]]:
        """Get the most recent match ids for a queue."""

    @abstractmethod
    async def resolve_match_outcome(
        self, routing: RegionRouting, match_id: str, puuid: str
    ) -> StageResult[Optional[bool]]:
        """Get whether ``puuid`` won ``match_id``; ``None`` if not a participant."""
