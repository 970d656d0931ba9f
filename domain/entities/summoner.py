"""Summoner profile and ranked standing."""
from dataclasses import dataclass
from typing import Optional

UNRANKED = "Unranked"


@dataclass(frozen=True)
class SummonerProfile:
    """Platform-side profile of an account.

    ``summoner_id`` is the encrypted id the league endpoint is keyed by; the
    summoner API has stopped returning it for some accounts, so it is optional.
    """

    profile_icon_id: int
    summoner_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict) -> 'SummonerProfile':
        return cls(
            profile_icon_id=int(data.get('profileIconId') or 0),
            summoner_id=data.get('id') or None,
        )


@dataclass(frozen=True)
class RankStanding:
    """Solo queue tier and league points."""

    tier_label: str = UNRANKED
    league_points: int = 0

    @classmethod
    def unranked(cls) -> 'RankStanding':
        return cls(UNRANKED, 0)
