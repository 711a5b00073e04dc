from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from spacegame.routers.deps import get_leaderboard_service, get_templates

router = APIRouter(prefix="", tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, page: int = 1, mode: str = "", region: str = ""):
    svc = get_leaderboard_service(request)
    board = await svc.get_leaderboard(page=page, mode=mode, region=region)
    templates = get_templates(request)
    return templates.TemplateResponse(request, "leaderboard.html", {"board": board})


@router.get("/health")
def health():
    return {"ok": True}
