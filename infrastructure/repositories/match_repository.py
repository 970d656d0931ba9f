"""Match repository implementation."""
from typing import List, Optional

from domain.enums import QueueType, RegionRouting
from domain.errors import UpstreamError
from domain.interfaces import IMatchRepository
from domain.results import StageResult
from infrastructure.api import RiotAPIClient


def outcome_for(match_data: dict, puuid: str) -> Optional[bool]:
    """Return the win flag of ``puuid`` in a match payload, or None if absent.

    Raises TypeError when the payload, its ``info`` or a participant is not
    the expected shape.
    """
    if not isinstance(match_data, dict):
        raise TypeError(f"match is {type(match_data).__name__}, not an object")
    info = match_data.get('info') or {}
    if not isinstance(info, dict):
        raise TypeError(f"match info is {type(info).__name__}, not an object")
    participants = info.get('participants') or []
    if not isinstance(participants, list):
        raise TypeError(f"participants is {type(participants).__name__}, not a list")
    for participant in participants:
        if not isinstance(participant, dict):
            raise TypeError(f"participant is {type(participant).__name__}, not an object")
        if participant.get('puuid') == puuid:
            return bool(participant.get('win'))
    return None


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    async def resolve_match_ids(
        self,
        routing: RegionRouting,
        puuid: str,
        queue_type: QueueType,
        count: int,
    ) -> StageResult[List[str]]:
        try:
            ids = await self.api_client.get_match_ids_by_puuid(routing, puuid, queue_type, count=count)
        except UpstreamError as exc:
            return StageResult.failure("matchIds", exc)
        return StageResult.success("matchIds", ids[:count])

    async def resolve_match_outcome(
        self,
        routing: RegionRouting,
        match_id: str,
        puuid: str,
    ) -> StageResult[Optional[bool]]:
        """
        Get one match and find the player's result.

        Returns:
            StageResult whose value is True (win), False (loss) or None when
            the player is not among the participants
        """
        try:
            match_data = await self.api_client.get_match_by_id(routing, match_id)
        except UpstreamError as exc:
            return StageResult.failure("match", exc)
        try:
            outcome = outcome_for(match_data, puuid)
        except TypeError as exc:
            return StageResult.failure("match", UpstreamError("match", 200, f"malformed match: {exc}"))
        return StageResult.success("match", outcome)
