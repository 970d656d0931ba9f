"""Aggregator: one player identity in, one leaderboard entry out."""
from __future__ import annotations

import asyncio
from typing import List, Optional
from urllib.parse import quote

from core.logging import get_logger
from domain.entities import (
    AccountRecord, LeaderboardEntry, MatchOutcomeTally, PlayerIdentity, RankStanding,
)
from domain.enums import QueueType, Region, RegionRouting
from domain.interfaces import IMatchRepository, ISummonerRepository
from domain.results import StageResult

logger = get_logger(__name__, service="aggregator")

DDRAGON_VERSION = "14.20.1"
AVATAR_URL = "https://ddragon.leagueoflegends.com/cdn/{version}/img/profileicon/{icon_id}.png"
OPGG_URL = "https://www.op.gg/summoners/{site}/{name}-{tag}"


def avatar_url(icon_id: int, version: str = DDRAGON_VERSION) -> str:
    return AVATAR_URL.format(version=version, icon_id=icon_id)


def opgg_url(routing: RegionRouting, game_name: str, tag_line: str) -> str:
    return OPGG_URL.format(
        site=routing.site_code,
        name=quote(game_name, safe=""),
        tag=quote(tag_line, safe=""),
    )


class LeaderboardAggregator:
    """
    Runs the lookup chain for one player.

    Stage policy:
    ─────────────────────────────────────────────────────────────────
    routing   → fatal   (UnsupportedRegionError, before any request)
    account   → fatal   (UpstreamError stage="account")
    profile   → fatal   (UpstreamError stage="profile")
    league    → default ("Unranked", 0)
    matchIds  → fatal   (UpstreamError stage="matchIds")
    match     → skipped (neither a win nor a loss)
    ─────────────────────────────────────────────────────────────────
    Stages return StageResult; only this class decides what is fatal.
    """

    def __init__(
        self,
        summoner_repo: ISummonerRepository,
        match_repo: IMatchRepository,
        *,
        queue_type: QueueType = QueueType.RANKED_SOLO_5x5,
        match_window: int = 10,
        max_concurrency: int = 10,
        ddragon_version: str = DDRAGON_VERSION,
    ):
        self.summoner_repo   = summoner_repo
        self.match_repo      = match_repo
        self.queue_type      = queue_type
        self.match_window    = match_window
        self.max_concurrency = max(1, max_concurrency)
        self.ddragon_version = ddragon_version

    async def build_entry(self, identity: PlayerIdentity) -> LeaderboardEntry:
        routing = Region.from_code(identity.region).routing

        account = self._mandatory(
            await self.summoner_repo.resolve_account(routing, identity.game_name, identity.tag_line)
        )
        profile = self._mandatory(await self.summoner_repo.resolve_profile(routing, account.puuid))

        standing = self._defaulted(
            await self.summoner_repo.resolve_rank_standing(routing, profile.summoner_id, self.queue_type),
            RankStanding.unranked(),
        )

        match_ids = self._mandatory(
            await self.match_repo.resolve_match_ids(routing, account.puuid, self.queue_type, self.match_window)
        )
        tally = await self._tally(routing, account, match_ids)

        entry = LeaderboardEntry.assemble(
            account,
            avatar_url(profile.profile_icon_id, self.ddragon_version),
            standing,
            tally,
            opgg_url(routing, account.game_name, account.tag_line),
        )
        logger.success(
            lambda: f"entry {account.game_name}#{account.tag_line} {entry.tier} {entry.lp}LP "
                    f"{tally.wins}W/{tally.losses}L of {len(match_ids)} ids",
        )
        return entry

    async def _tally(
        self,
        routing: RegionRouting,
        account: AccountRecord,
        match_ids: List[str],
    ) -> MatchOutcomeTally:
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _one(match_id: str) -> StageResult[Optional[bool]]:
            async with semaphore:
                return await self.match_repo.resolve_match_outcome(routing, match_id, account.puuid)

        results = await asyncio.gather(*(_one(mid) for mid in match_ids))

        outcomes: List[Optional[bool]] = []
        for match_id, result in zip(match_ids, results):
            if not result.ok:
                logger.info(
                    lambda: "match-skipped",
                    extra={"stage": "match", "match_id": match_id, "status": result.error.status},
                )
                continue
            if result.value is None:
                logger.debug(lambda: "match-skipped player not in participants", extra={"match_id": match_id})
            outcomes.append(result.value)
        return MatchOutcomeTally.from_outcomes(outcomes)

    @staticmethod
    def _mandatory(result: StageResult):
        if not result.ok:
            logger.error(
                lambda: f"stage-failed {result.error}",
                extra={"stage": result.stage, "status": result.error.status},
            )
        else:
            logger.debug(lambda: "stage-ok", extra={"stage": result.stage})
        return result.unwrap()

    @staticmethod
    def _defaulted(result: StageResult, default):
        if not result.ok:
            logger.warning(
                lambda: f"stage-defaulted {result.error}",
                extra={"stage": result.stage, "status": result.error.status},
            )
        return result.unwrap_or(default)
