from __future__ import annotations

import json

from application.use_cases import BuildLeaderboardUseCase
from config import settings
from core.logging import get_logger
from domain.errors import LeaderboardError


class FetchCommand:
    """Run one aggregation cycle and print the endpoint's JSON."""

    def __init__(self) -> None:
        self._log = get_logger(__name__, service="fetch-cli")

    async def run(self) -> int:
        try:
            entries = await BuildLeaderboardUseCase(settings).execute()
        except LeaderboardError as exc:
            self._log.error(lambda: f"fetch failed: {exc}")
            print(json.dumps({"ok": False, "error": str(exc)}))
            return 1
        except Exception as exc:
            self._log.exception(lambda: f"unexpected error: {exc}")
            print(json.dumps({"ok": False, "error": str(exc) or type(exc).__name__}))
            return 1
        print(json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False))
        return 0
