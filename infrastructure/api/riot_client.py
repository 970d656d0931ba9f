"""Riot Games API client."""
import time
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from config import settings
from core.logging import get_logger
from domain.enums import QueueType, RegionRouting
from domain.errors import UpstreamError

logger = get_logger(__name__, service="riot")


def _segment(value: str) -> str:
    """URL-escape one path segment (spaces, ``#`` and ``/`` included)."""
    return quote(value, safe="")


class RiotAPIClient:
    """Asynchronous Riot API client.

    Every call is a single attempt: a non-2xx response or a transport failure
    raises ``UpstreamError`` tagged with the calling stage. Nothing is cached.
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key   = api_key
        self.session: Optional[httpx.AsyncClient] = None
        self.timeout   = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.transport = transport
        self.request_count = 0

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            transport=self.transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def _get_platform_url(self, routing: RegionRouting) -> str:
        return f"https://{routing.platform}.api.riotgames.com"

    def _get_regional_url(self, routing: RegionRouting) -> str:
        return f"https://{routing.regional}.api.riotgames.com"

    async def _make_request(self, url: str, stage: str, params: Optional[dict] = None) -> Any:
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        self.request_count += 1
        start = time.perf_counter()
        try:
            response = await self.session.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.warning(lambda: "riot-unreachable", extra={"stage": stage, "url": url, "error": str(exc)})
            raise UpstreamError(stage, None, str(exc) or type(exc).__name__) from exc

        latency_ms = int((time.perf_counter() - start) * 1000.0)
        if not response.is_success:
            if response.status_code == 401:
                logger.error("401 Unauthorized — check RIOT_API_KEY", extra={"stage": stage})
            elif response.status_code == 429:
                logger.warning(
                    lambda: f"429 rate-limited (Retry-After={response.headers.get('Retry-After', '?')})",
                    extra={"stage": stage},
                )
            logger.debug(
                lambda: f"HTTP {response.status_code}",
                extra={"stage": stage, "url": url, "status": response.status_code, "latency_ms": latency_ms},
            )
            raise UpstreamError(stage, response.status_code, response.text)

        logger.trace(lambda: "riot-ok", extra={"stage": stage, "url": url, "latency_ms": latency_ms})
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(stage, response.status_code, f"invalid JSON: {exc}") from exc

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, routing: RegionRouting, game_name: str, tag_line: str) -> dict:
        base = self._get_regional_url(routing)
        url  = f"{base}/riot/account/v1/accounts/by-riot-id/{_segment(game_name)}/{_segment(tag_line)}"
        return await self._make_request(url, "account")

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_puuid(self, routing: RegionRouting, puuid: str) -> dict:
        base = self._get_platform_url(routing)
        return await self._make_request(f"{base}/lol/summoner/v4/summoners/by-puuid/{_segment(puuid)}", "profile")

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_summoner(self, routing: RegionRouting, summoner_id: str) -> List[dict]:
        base = self._get_platform_url(routing)
        result = await self._make_request(
            f"{base}/lol/league/v4/entries/by-summoner/{_segment(summoner_id)}", "league"
        )
        return result if isinstance(result, list) else []

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        routing: RegionRouting,
        puuid: str,
        queue: QueueType,
        count: int = 10,
    ) -> List[str]:
        base   = self._get_regional_url(routing)
        url    = f"{base}/lol/match/v5/matches/by-puuid/{_segment(puuid)}/ids"
        result = await self._make_request(url, "matchIds", params={"queue": queue.queue_id, "count": min(count, 100)})
        return [str(mid) for mid in result] if isinstance(result, list) else []

    async def get_match_by_id(self, routing: RegionRouting, match_id: str) -> dict:
        base = self._get_regional_url(routing)
        return await self._make_request(f"{base}/lol/match/v5/matches/{_segment(match_id)}", "match")
