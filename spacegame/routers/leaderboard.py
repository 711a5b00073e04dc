from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from spacegame.repositories.base import ItemNotFoundError
from spacegame.routers.deps import get_leaderboard_service, page_to_dict

router = APIRouter(prefix="/api", tags=["leaderboard"])


@router.get("/leaderboard")
async def leaderboard(request: Request, page: int = 1, mode: str = "", region: str = ""):
    svc = get_leaderboard_service(request)
    board = await svc.get_leaderboard(page=page, mode=mode, region=region)
    return page_to_dict(board)


@router.get("/profiles/{profile_id}")
async def profile(request: Request, profile_id: str, rank: int | None = None):
    svc = get_leaderboard_service(request)
    try:
        entity, rank_value = await svc.get_profile(profile_id, rank)
    except ItemNotFoundError:
        raise HTTPException(404, "Profile not found")
    return {"profile": entity.model_dump(by_alias=True), "rank": rank_value}
