"""FastAPI app factory for the Space Game leaderboard."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from spacegame.core.config import Settings, get_settings
from spacegame.core.logging import configure_logging
from spacegame.domain.models import Profile, Score
from spacegame.repositories.local_repository import LocalDocumentRepository
from spacegame.routers import leaderboard as leaderboard_router
from spacegame.routers import pages as pages_router
from spacegame.services.leaderboard_service import LeaderboardService

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'self'; style-src 'self' 'unsafe-inline'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the app. Both JSON documents are loaded eagerly, so a missing or
    malformed file raises LoadError here instead of on the first request.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    scores = LocalDocumentRepository(Score, settings.scores_file)
    profiles = LocalDocumentRepository(Profile, settings.profiles_file)

    app = FastAPI(title="Space Game Leaderboard")
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.state.leaderboard_service = LeaderboardService(
        scores,
        profiles,
        page_size=settings.leaderboard_page_size,
    )

    app.include_router(leaderboard_router.router)
    app.include_router(pages_router.router)

    logger.info("Leaderboard app ready (env=%s)", settings.app_env)
    return app
