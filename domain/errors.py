"""Error taxonomy surfaced by a leaderboard cycle."""
from typing import Optional


class LeaderboardError(Exception):
    """Base class for errors that abort a leaderboard cycle."""

    http_status: int = 500


class MissingCredentialError(LeaderboardError):
    """No Riot API key is configured."""

    def __init__(self, message: str = "Missing RIOT_API_KEY"):
        super().__init__(message)


class UnsupportedRegionError(LeaderboardError):
    """The configured region has no routing entry."""

    http_status = 400

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported region: {code}")


class UpstreamError(LeaderboardError):
    """A Riot API call returned a non-success response or never completed.

    ``status`` is ``None`` for transport failures (timeouts, refused
    connections); ``body`` then carries the exception text.
    """

    def __init__(self, stage: str, status: Optional[int], body: str = ""):
        self.stage = stage
        self.status = status
        self.body = body
        super().__init__(f"Riot {status if status is not None else 'unreachable'}: {body}")
