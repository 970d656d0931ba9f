"""Summoner repository implementation."""
from typing import List, Optional

from core.logging import get_logger
from domain.entities import AccountRecord, SummonerProfile, RankStanding
from domain.enums import QueueType, RegionRouting, tier_label
from domain.errors import UpstreamError
from domain.interfaces import ISummonerRepository
from domain.results import StageResult
from infrastructure.api import RiotAPIClient

logger = get_logger(__name__, service="aggregator")


def _league_points(value) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def standing_from_entries(entries: List[dict], queue_type: QueueType) -> RankStanding:
    """Pick the entry for ``queue_type`` out of a league-entries payload.

    Raises TypeError when an entry is not an object.
    """
    for e in entries:
        if not isinstance(e, dict):
            raise TypeError(f"league entry is {type(e).__name__}, not an object")
    entry = next((e for e in entries if e.get('queueType') == queue_type.api_queue_name), None)
    if not entry or not entry.get('tier'):
        return RankStanding.unranked()
    return RankStanding(
        tier_label=tier_label(entry.get('tier') or '', entry.get('rank') or ''),
        league_points=_league_points(entry.get('leaguePoints')),
    )


class SummonerRepository(ISummonerRepository):
    """Repository for account and summoner data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize summoner repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def resolve_account(
        self,
        routing: RegionRouting,
        game_name: str,
        tag_line: str,
    ) -> StageResult[AccountRecord]:
        """
        Resolve a Riot ID to its account.

        Args:
            routing: Region routing
            game_name: Riot ID name
            tag_line: Riot ID tag

        Returns:
            StageResult holding the AccountRecord or the upstream error
        """
        try:
            data = await self.api_client.get_account_by_riot_id(routing, game_name, tag_line)
            return StageResult.success("account", AccountRecord.from_api(data))
        except UpstreamError as exc:
            return StageResult.failure("account", exc)
        except (KeyError, TypeError) as exc:
            return StageResult.failure("account", UpstreamError("account", 200, f"malformed account: {exc}"))

    async def resolve_profile(self, routing: RegionRouting, puuid: str) -> StageResult[SummonerProfile]:
        try:
            data = await self.api_client.get_summoner_by_puuid(routing, puuid)
        except UpstreamError as exc:
            return StageResult.failure("profile", exc)
        if not isinstance(data, dict):
            return StageResult.failure("profile", UpstreamError("profile", 200, "malformed summoner payload"))
        return StageResult.success("profile", SummonerProfile.from_api(data))

    async def resolve_rank_standing(
        self,
        routing: RegionRouting,
        summoner_id: Optional[str],
        queue_type: QueueType,
    ) -> StageResult[RankStanding]:
        """Get the standing in ``queue_type``; no summoner id is a failure."""
        if not summoner_id:
            return StageResult.failure("league", UpstreamError("league", None, "no summoner id"))
        try:
            entries = await self.api_client.get_league_entries_by_summoner(routing, summoner_id)
        except UpstreamError as exc:
            return StageResult.failure("league", exc)
        try:
            standing = standing_from_entries(entries, queue_type)
        except TypeError as exc:
            return StageResult.failure("league", UpstreamError("league", 200, f"malformed league entries: {exc}"))
        return StageResult.success("league", standing)
