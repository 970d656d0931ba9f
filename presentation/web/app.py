"""HTTP surface: the leaderboard endpoint and the presenter page."""
from __future__ import annotations

from typing import Any, Optional

import httpx
from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse

from application.use_cases import BuildLeaderboardUseCase
from config.settings import Settings
from core.logging import get_logger
from domain.errors import LeaderboardError
from .fixtures import debug_payload
from .page import render_page

logger = get_logger(__name__, service="web")

router = APIRouter()

_NO_STORE = {"Cache-Control": "no-store"}


def _json(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=_NO_STORE)


def _failure(status_code: int, message: str) -> JSONResponse:
    return _json({"ok": False, "error": message}, status_code=status_code)


def _is_debug(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


@router.get("/api/leaderboard")
@router.get("/leaderboard")
async def get_leaderboard(request: Request, debug: Optional[str] = Query(None)):
    if _is_debug(debug):
        return _json(debug_payload())

    settings: Settings = request.app.state.settings
    use_case = BuildLeaderboardUseCase(settings, transport=request.app.state.transport)
    try:
        entries = await use_case.execute()
    except LeaderboardError as exc:
        logger.warning(lambda: f"leaderboard failed: {exc}", extra={"status": exc.http_status})
        return _failure(exc.http_status, str(exc))
    except Exception as exc:
        logger.exception(lambda: f"unexpected error: {exc}")
        return _failure(500, str(exc) or type(exc).__name__)
    return _json([entry.to_dict() for entry in entries])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    settings: Settings = request.app.state.settings
    return HTMLResponse(render_page(refresh_interval_s=settings.REFRESH_INTERVAL_S))


def create_app(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the app. ``transport`` replaces the network for outbound Riot calls."""
    app = FastAPI(title="LoL Leaderboard", docs_url=None, redoc_url=None)
    app.state.settings = settings or Settings()
    app.state.transport = transport
    app.include_router(router)
    return app
