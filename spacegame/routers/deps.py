"""Accessors for objects the app factory stores on ``app.state``."""

from __future__ import annotations

from fastapi import Request
from fastapi.templating import Jinja2Templates

from spacegame.services.leaderboard_service import LeaderboardEntry, LeaderboardPage, LeaderboardService


def get_leaderboard_service(request: Request) -> LeaderboardService:
    svc = getattr(getattr(request.app, "state", None), "leaderboard_service", None)
    if not svc:
        raise RuntimeError("LeaderboardService not configured")
    return svc


def get_templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def entry_to_dict(entry: LeaderboardEntry) -> dict:
    return {
        "rank": entry.rank,
        "score": entry.score.model_dump(by_alias=True),
        "profile": entry.profile.model_dump(by_alias=True) if entry.profile else None,
    }


def page_to_dict(board: LeaderboardPage) -> dict:
    return {
        "page": board.page,
        "pageSize": board.page_size,
        "pageCount": board.page_count,
        "totalResults": board.total_results,
        "selectedMode": board.selected_mode,
        "selectedRegion": board.selected_region,
        "gameModes": list(board.game_modes),
        "gameRegions": list(board.game_regions),
        "entries": [entry_to_dict(entry) for entry in board.entries],
    }
