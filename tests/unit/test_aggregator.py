"""Unit tests for the aggregation pipeline: fatal vs defaulted stages."""

import httpx
import pytest

from application.services.aggregator import LeaderboardAggregator, avatar_url, opgg_url
from domain.entities import PlayerIdentity
from domain.enums import Region
from domain.errors import UnsupportedRegionError, UpstreamError
from infrastructure import MatchRepository, RiotAPIClient, SummonerRepository
from tests.conftest import PUUID, make_match

PLAYER = PlayerIdentity(game_name="wot m9 i go afk", tag_line="EUW", region="EUW")


async def _build(fake_riot, identity=PLAYER, **kwargs):
    async with RiotAPIClient("RGAPI-test", transport=fake_riot.transport) as client:
        aggregator = LeaderboardAggregator(SummonerRepository(client), MatchRepository(client), **kwargs)
        return await aggregator.build_entry(identity)


@pytest.mark.asyncio
class TestHappyPath:
    async def test_entry_is_assembled(self, fake_riot):
        entry = await _build(fake_riot)

        assert entry.id == "self"
        assert entry.rank == 1
        assert entry.game_name == "wot m9 i go afk"
        assert entry.tag_line == "EUW"
        assert entry.tier == "Gold II"
        assert entry.lp == 47
        assert (entry.wins, entry.losses, entry.games) == (6, 4, 10)
        assert entry.avatar_url == "https://ddragon.leagueoflegends.com/cdn/14.20.1/img/profileicon/29.png"
        assert entry.opgg_url == "https://www.op.gg/summoners/euw/wot%20m9%20i%20go%20afk-EUW"

    async def test_stage_call_counts(self, fake_riot):
        await _build(fake_riot)

        assert fake_riot.count("/accounts/by-riot-id/") == 1
        assert fake_riot.count("/summoners/by-puuid/") == 1
        assert fake_riot.count("/entries/by-summoner/summ-1") == 1
        assert fake_riot.count("/matches/by-puuid/") == 1
        assert len(fake_riot.requests) == 14

    async def test_regional_and_platform_hosts(self, fake_riot):
        await _build(fake_riot, identity=PlayerIdentity("Faker", "KR1", "kr"))

        hosts = {r.url.path.split("/")[1]: r.url.host for r in fake_riot.requests}
        assert hosts["riot"] == "asia.api.riotgames.com"
        assert {r.url.host for r in fake_riot.requests if "/summoner/" in r.url.path} == {"kr.api.riotgames.com"}
        assert {r.url.host for r in fake_riot.requests if "/match/" in r.url.path} == {"asia.api.riotgames.com"}

    async def test_match_window_is_requested(self, fake_riot):
        await _build(fake_riot, match_window=5)

        ids_request = next(r for r in fake_riot.requests if "/ids" in r.url.path)
        assert ids_request.url.params["count"] == "5"
        assert ids_request.url.params["queue"] == "420"

    async def test_ddragon_version_is_configurable(self, fake_riot):
        entry = await _build(fake_riot, ddragon_version="15.1.1")
        assert "/cdn/15.1.1/" in entry.avatar_url


@pytest.mark.asyncio
class TestFatalStages:
    async def test_unsupported_region_issues_no_request(self, fake_riot):
        with pytest.raises(UnsupportedRegionError):
            await _build(fake_riot, identity=PlayerIdentity("a", "b", "MOON"))
        assert fake_riot.requests == []

    async def test_account_failure_stops_the_chain(self, fake_riot):
        fake_riot.account = (404, {"status": {"message": "Data not found"}})

        with pytest.raises(UpstreamError) as exc_info:
            await _build(fake_riot)

        assert exc_info.value.stage == "account"
        assert exc_info.value.status == 404
        assert "Data not found" in exc_info.value.body
        assert len(fake_riot.requests) == 1

    async def test_profile_failure_is_fatal(self, fake_riot):
        fake_riot.summoner = (403, {"status": {"message": "Forbidden"}})

        with pytest.raises(UpstreamError) as exc_info:
            await _build(fake_riot)

        assert exc_info.value.stage == "profile"
        assert fake_riot.count("/league/") == 0
        assert fake_riot.count("/match/") == 0

    async def test_match_ids_failure_is_fatal(self, fake_riot):
        fake_riot.match_ids = (429, {"status": {"message": "Rate limit exceeded"}})

        with pytest.raises(UpstreamError) as exc_info:
            await _build(fake_riot)

        assert exc_info.value.stage == "matchIds"
        assert exc_info.value.status == 429
        assert fake_riot.count("/lol/match/v5/matches/EUW1_") == 0

    async def test_account_transport_failure(self, fake_riot):
        fake_riot.account = (0, httpx.ConnectError("connection refused"))

        with pytest.raises(UpstreamError) as exc_info:
            await _build(fake_riot)

        assert exc_info.value.stage == "account"
        assert exc_info.value.status is None


@pytest.mark.asyncio
class TestDefaultedStages:
    @pytest.mark.parametrize("status", [401, 403, 429, 500])
    async def test_league_failure_defaults_to_unranked(self, fake_riot, status):
        fake_riot.league = (status, {"status": {"status_code": status}})

        entry = await _build(fake_riot)

        assert (entry.tier, entry.lp) == ("Unranked", 0)
        assert entry.games == 10

    async def test_missing_summoner_id_skips_league_call(self, fake_riot):
        fake_riot.summoner = (200, {"puuid": PUUID, "profileIconId": 29})

        entry = await _build(fake_riot)

        assert (entry.tier, entry.lp) == ("Unranked", 0)
        assert fake_riot.count("/league/") == 0

    async def test_no_solo_entry_is_unranked(self, fake_riot):
        fake_riot.league = (200, [{"queueType": "RANKED_FLEX_SR", "tier": "GOLD", "rank": "I", "leaguePoints": 3}])

        entry = await _build(fake_riot)

        assert (entry.tier, entry.lp) == ("Unranked", 0)

    async def test_bad_league_points_become_zero(self, fake_riot):
        fake_riot.league = (200, [{"queueType": "RANKED_SOLO_5x5", "tier": "IRON", "rank": "IV", "leaguePoints": "n/a"}])

        entry = await _build(fake_riot)

        assert (entry.tier, entry.lp) == ("Iron IV", 0)

    @pytest.mark.parametrize("payload", [["oops"], [None], [1, {"queueType": "RANKED_SOLO_5x5"}]])
    async def test_malformed_league_entries_default_to_unranked(self, fake_riot, payload):
        fake_riot.league = (200, payload)

        entry = await _build(fake_riot)

        assert (entry.tier, entry.lp) == ("Unranked", 0)
        assert entry.games == 10

    async def test_null_tier_is_unranked(self, fake_riot):
        fake_riot.league = (200, [{"queueType": "RANKED_SOLO_5x5", "tier": None, "rank": None, "leaguePoints": 5}])

        entry = await _build(fake_riot)

        assert (entry.tier, entry.lp) == ("Unranked", 0)

    async def test_null_division_is_dropped(self, fake_riot):
        fake_riot.league = (200, [{"queueType": "RANKED_SOLO_5x5", "tier": "MASTER", "rank": None, "leaguePoints": 120}])

        entry = await _build(fake_riot)

        assert (entry.tier, entry.lp) == ("Master", 120)


@pytest.mark.asyncio
class TestMatchTally:
    async def test_failed_fetches_shrink_the_sample(self, fake_riot):
        # Wins are EUW1_0..EUW1_5; knock out two wins and one loss.
        for match_id in ("EUW1_0", "EUW1_1", "EUW1_9"):
            fake_riot.matches[match_id] = (429, {"status": {"message": "Rate limit exceeded"}})

        entry = await _build(fake_riot)

        assert (entry.wins, entry.losses) == (4, 3)
        assert entry.games == 7
        assert fake_riot.count("/lol/match/v5/matches/EUW1_") == 10

    async def test_player_missing_from_participants_is_skipped(self, fake_riot):
        fake_riot.matches["EUW1_2"] = (200, make_match(None, win=True))
        fake_riot.matches["EUW1_8"] = (200, {"metadata": {}})

        entry = await _build(fake_riot)

        assert (entry.wins, entry.losses) == (5, 3)
        assert entry.games == entry.wins + entry.losses

    async def test_games_never_exceeds_successful_fetches(self, fake_riot):
        fake_riot.matches["EUW1_3"] = (0, httpx.ReadTimeout("slow"))
        fake_riot.matches["EUW1_4"] = (200, make_match(None, win=False))

        entry = await _build(fake_riot)

        successes = 9
        assert entry.games <= successes < 10
        assert entry.games == entry.wins + entry.losses == 8

    @pytest.mark.parametrize("payload", [
        {"info": {"participants": [None]}},
        {"info": "not-an-object"},
        {"info": {"participants": "nobody"}},
        ["not", "a", "match"],
    ])
    async def test_malformed_match_is_skipped(self, fake_riot, payload):
        fake_riot.matches["EUW1_0"] = (200, payload)

        entry = await _build(fake_riot)

        assert (entry.wins, entry.losses) == (5, 4)
        assert entry.games == 9

    async def test_no_match_ids(self, fake_riot):
        fake_riot.match_ids = (200, [])

        entry = await _build(fake_riot)

        assert (entry.wins, entry.losses, entry.games) == (0, 0, 0)

    async def test_concurrency_limit_of_one_still_counts_everything(self, fake_riot):
        entry = await _build(fake_riot, max_concurrency=1)
        assert (entry.wins, entry.losses) == (6, 4)


def test_url_helpers():
    assert avatar_url(4567, "14.20.1") == "https://ddragon.leagueoflegends.com/cdn/14.20.1/img/profileicon/4567.png"
    assert opgg_url(Region.LAN.routing, "Señor #1", "LAN") == "https://www.op.gg/summoners/lan/Se%C3%B1or%20%231-LAN"
