"""
Shared fixtures.

Riot is replaced by ``FakeRiot``: an ``httpx.MockTransport`` handler that
routes by URL path, records every request, and answers from per-stage
``(status, payload)`` pairs the test can overwrite.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import httpx
import pytest

from config.settings import Settings

PUUID = "puuid-self"

_ENV_KEYS = (
    "RIOT_API_KEY", "PLAYER_GAME_NAME", "PLAYER_TAG", "PLAYER_REGION",
    "MATCH_WINDOW", "MAX_CONCURRENT_REQUESTS", "DDRAGON_VERSION", "REFRESH_INTERVAL_S",
)

Reply = Tuple[int, Any]


def make_match(puuid: str | None, win: bool) -> Dict[str, Any]:
    participants = [{"puuid": f"other-{i}", "win": not win} for i in range(9)]
    if puuid is not None:
        participants.insert(3, {"puuid": puuid, "win": win})
    return {"metadata": {"matchId": "x"}, "info": {"queueId": 420, "participants": participants}}


class FakeRiot:
    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.account: Reply = (200, {"puuid": PUUID, "gameName": "wot m9 i go afk", "tagLine": "EUW"})
        self.summoner: Reply = (200, {"id": "summ-1", "puuid": PUUID, "profileIconId": 29})
        self.league: Reply = (200, [
            {"queueType": "RANKED_FLEX_SR", "tier": "SILVER", "rank": "I", "leaguePoints": 12},
            {"queueType": "RANKED_SOLO_5x5", "tier": "GOLD", "rank": "II", "leaguePoints": 47},
        ])
        self.match_ids: Reply = (200, [f"EUW1_{i}" for i in range(10)])
        self.matches: Dict[str, Reply] = {
            f"EUW1_{i}": (200, make_match(PUUID, win=i < 6)) for i in range(10)
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith("/riot/account/v1/accounts/by-riot-id/"):
            return self._reply(self.account)
        if path.startswith("/lol/summoner/v4/summoners/by-puuid/"):
            return self._reply(self.summoner)
        if path.startswith("/lol/league/v4/entries/by-summoner/"):
            return self._reply(self.league)
        if path.startswith("/lol/match/v5/matches/by-puuid/"):
            return self._reply(self.match_ids)
        if path.startswith("/lol/match/v5/matches/"):
            match_id = path.rsplit("/", 1)[-1]
            return self._reply(self.matches.get(match_id, (404, {"status": {"status_code": 404}})))
        return httpx.Response(404, json={"status": {"message": "unknown path"}})

    @staticmethod
    def _reply(reply: Reply) -> httpx.Response:
        status, payload = reply
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]

    def count(self, fragment: str) -> int:
        return sum(1 for p in self.paths() if fragment in p)


@pytest.fixture
def fake_riot() -> FakeRiot:
    return FakeRiot()


@pytest.fixture
def make_settings(monkeypatch):
    """Build a fresh Settings from a clean environment plus overrides."""

    def _make(**env: str) -> Settings:
        for key in _ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
        defaults = {"RIOT_API_KEY": "RGAPI-test", "PLAYER_GAME_NAME": "wot m9 i go afk", "PLAYER_TAG": "EUW"}
        defaults.update(env)
        for key, value in defaults.items():
            monkeypatch.setenv(key, value)
        return Settings()

    return _make
