"""Unit tests for RiotAPIClient request shapes and error mapping."""

import httpx
import pytest

from domain.enums import QueueType, Region
from domain.errors import UpstreamError
from infrastructure.api import RiotAPIClient

EUW = Region.EUW.routing


def _client(handler) -> RiotAPIClient:
    return RiotAPIClient("RGAPI-key", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
class TestRiotAPIClient:
    async def test_account_lookup_escapes_riot_id_and_sends_key(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"puuid": "p", "gameName": "a b", "tagLine": "EUW"})

        async with _client(handler) as client:
            await client.get_account_by_riot_id(EUW, "wot m9 i go afk", "EUW")

        request = seen[0]
        assert request.url.host == "europe.api.riotgames.com"
        assert request.url.raw_path.decode() == "/riot/account/v1/accounts/by-riot-id/wot%20m9%20i%20go%20afk/EUW"
        assert request.headers["X-Riot-Token"] == "RGAPI-key"

    async def test_summoner_and_league_use_platform_host(self):
        hosts = []

        def handler(request):
            hosts.append(request.url.host)
            return httpx.Response(200, json=[] if "league" in request.url.path else {"profileIconId": 1})

        async with _client(handler) as client:
            await client.get_summoner_by_puuid(Region.NA.routing, "p")
            await client.get_league_entries_by_summoner(Region.NA.routing, "s")

        assert hosts == ["na1.api.riotgames.com", "na1.api.riotgames.com"]

    async def test_match_ids_query(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=["EUW1_1", "EUW1_2"])

        async with _client(handler) as client:
            ids = await client.get_match_ids_by_puuid(EUW, "p", QueueType.RANKED_SOLO_5x5, count=10)

        assert ids == ["EUW1_1", "EUW1_2"]
        assert seen[0].url.params["queue"] == "420"
        assert seen[0].url.params["count"] == "10"
        assert seen[0].url.path == "/lol/match/v5/matches/by-puuid/p/ids"

    @pytest.mark.parametrize("status", [401, 403, 404, 429, 503])
    async def test_non_success_raises_with_stage_status_body(self, status):
        def handler(request):
            return httpx.Response(status, text="nope")

        async with _client(handler) as client:
            with pytest.raises(UpstreamError) as exc_info:
                await client.get_summoner_by_puuid(EUW, "p")

        assert exc_info.value.stage == "profile"
        assert exc_info.value.status == status
        assert exc_info.value.body == "nope"

    async def test_transport_failure_has_no_status(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out")

        async with _client(handler) as client:
            with pytest.raises(UpstreamError) as exc_info:
                await client.get_match_by_id(EUW, "EUW1_1")

        assert exc_info.value.stage == "match"
        assert exc_info.value.status is None
        assert "timed out" in exc_info.value.body

    async def test_each_call_is_a_single_attempt(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500, text="boom")

        async with _client(handler) as client:
            with pytest.raises(UpstreamError):
                await client.get_account_by_riot_id(EUW, "a", "b")

        assert len(calls) == 1

    async def test_requires_context_manager(self):
        client = RiotAPIClient("k")
        with pytest.raises(RuntimeError):
            await client.get_match_by_id(EUW, "x")
