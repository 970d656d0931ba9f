"""Use case for building the leaderboard - one aggregation cycle."""
from __future__ import annotations

from typing import Callable, List, Optional

import httpx

from application.services.aggregator import LeaderboardAggregator
from config.settings import Settings
from core.logging import context, get_logger, new_cycle_id
from domain.entities import LeaderboardEntry, PlayerIdentity
from domain.enums import Region
from infrastructure import MatchRepository, RiotAPIClient, SummonerRepository

logger = get_logger(__name__, service="leaderboard")

ClientFactory = Callable[[str], RiotAPIClient]


class BuildLeaderboardUseCase:
    """
    Runs one full cycle: credential check, routing check, aggregation.

    Nothing is kept between calls to ``execute``; each call opens its own
    Riot client and closes it when the cycle ends.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: Optional[ClientFactory] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self._client_factory = client_factory or (
            lambda key: RiotAPIClient(key, timeout=settings.REQUEST_TIMEOUT, transport=transport)
        )

    async def execute(self, identity: Optional[PlayerIdentity] = None) -> List[LeaderboardEntry]:
        self.settings.validate()
        identity = identity or self.settings.player()
        # Fail on routing before a client is ever opened.
        Region.from_code(identity.region)

        with context(cycle=new_cycle_id(), player=identity.riot_id, region=identity.region.upper()):
            logger.info("cycle-start")
            async with self._client_factory(self.settings.RIOT_API_KEY) as client:
                aggregator = LeaderboardAggregator(
                    SummonerRepository(client),
                    MatchRepository(client),
                    match_window=self.settings.MATCH_WINDOW,
                    max_concurrency=self.settings.MAX_CONCURRENT_REQUESTS,
                    ddragon_version=self.settings.DDRAGON_VERSION,
                )
                entry = await aggregator.build_entry(identity)
                logger.info(lambda: "cycle-done", extra={"count": client.request_count})
        return [entry]
