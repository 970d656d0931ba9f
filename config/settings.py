"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

from domain.entities import PlayerIdentity
from domain.errors import MissingCredentialError

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)
load_dotenv()


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """
    Environment-backed settings.

    Values are read when the instance is built, so tests (and the server on
    reload) can construct a fresh ``Settings()`` after changing the
    environment. The module-level ``settings`` is the process default.
    """

    def __init__(self) -> None:
        self.RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '').strip()

        # ── Tracked player ───────────────────────────────────────────────
        self.PLAYER_GAME_NAME: str = os.getenv('PLAYER_GAME_NAME', 'wot m9 i go afk')
        self.PLAYER_TAG:       str = os.getenv('PLAYER_TAG', 'EUW')
        # The tag doubles as the region code unless told otherwise.
        self.PLAYER_REGION:    str = os.getenv('PLAYER_REGION', '') or (self.PLAYER_TAG or 'EUW').upper()

        # ── HTTP ─────────────────────────────────────────────────────────
        self.REQUEST_TIMEOUT:         int = _int('REQUEST_TIMEOUT', 30)
        self.MAX_CONCURRENT_REQUESTS: int = _int('MAX_CONCURRENT_REQUESTS', 10)

        # ── Aggregation ──────────────────────────────────────────────────
        self.MATCH_WINDOW:    int = _int('MATCH_WINDOW', 10)
        # Must match the game-data version the profile icon ids come from.
        self.DDRAGON_VERSION: str = os.getenv('DDRAGON_VERSION', '14.20.1')

        # ── Presenter / server ───────────────────────────────────────────
        self.REFRESH_INTERVAL_S: int = _int('REFRESH_INTERVAL_S', 20)
        self.HOST:               str = os.getenv('HOST', '127.0.0.1')
        self.PORT:               int = _int('PORT', 8000)

        # ── Paths / logging ──────────────────────────────────────────────
        self.BASE_DIR: Path = Path(__file__).resolve().parent.parent
        self.LOG_DIR:  Path = Path(os.getenv('LOG_DIR', '')) if os.getenv('LOG_DIR') else self.BASE_DIR / 'data' / 'logs'
        self.LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    def validate(self) -> None:
        if not self.RIOT_API_KEY:
            raise MissingCredentialError()

    def player(self) -> PlayerIdentity:
        """Build the tracked player's identity from configuration."""
        return PlayerIdentity(
            game_name=self.PLAYER_GAME_NAME,
            tag_line=self.PLAYER_TAG,
            region=self.PLAYER_REGION,
        )


settings = Settings()
