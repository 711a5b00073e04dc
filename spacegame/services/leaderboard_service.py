"""Leaderboard use cases: filtered, ranked and paged high scores."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from spacegame.domain.models import GAME_MODES, GAME_REGIONS, Profile, Score
from spacegame.repositories.base import DocumentRepository, ItemNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    score: Score
    profile: Optional[Profile]


@dataclass(frozen=True)
class LeaderboardPage:
    page: int
    page_size: int
    total_results: int
    selected_mode: str
    selected_region: str
    entries: list[LeaderboardEntry] = field(default_factory=list)
    game_modes: tuple[str, ...] = GAME_MODES
    game_regions: tuple[str, ...] = GAME_REGIONS

    @property
    def page_count(self) -> int:
        if not self.total_results:
            return 0
        return -(-self.total_results // self.page_size)


class LeaderboardService:
    """Builds leaderboard pages from the score and profile repositories."""

    def __init__(
        self,
        scores: DocumentRepository[Score],
        profiles: DocumentRepository[Profile],
        page_size: int = 10,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.scores = scores
        self.profiles = profiles
        self.page_size = page_size

    def normalize(self, value: str | None) -> str:
        return (value or "").strip()

    def build_predicate(self, mode: str = "", region: str = ""):
        mode_value = self.normalize(mode)
        region_value = self.normalize(region)

        def predicate(score: Score) -> bool:
            return (not mode_value or score.game_mode == mode_value) and (
                not region_value or score.game_region == region_value
            )

        return predicate

    async def get_leaderboard(self, page: int = 1, mode: str | None = "", region: str | None = "") -> LeaderboardPage:
        """
        Return one leaderboard page. ``page`` is 1-based here; the repository
        pages from zero, so the query is issued with ``page - 1``.
        """
        page = max(int(page or 1), 1)
        mode_value = self.normalize(mode)
        region_value = self.normalize(region)
        predicate = self.build_predicate(mode_value, region_value)

        scores = await self.scores.get_items(
            predicate,
            lambda score: score.high_score,
            page=page - 1,
            page_size=self.page_size,
        )
        total = await self.scores.count_items(predicate)

        first_rank = (page - 1) * self.page_size + 1
        entries = []
        for offset, score in enumerate(scores):
            entries.append(
                LeaderboardEntry(
                    rank=first_rank + offset,
                    score=score,
                    profile=await self._find_profile(score),
                )
            )

        return LeaderboardPage(
            page=page,
            page_size=self.page_size,
            total_results=total,
            selected_mode=mode_value,
            selected_region=region_value,
            entries=entries,
        )

    async def get_profile(self, profile_id: str, rank: int | None = None) -> tuple[Profile, int | None]:
        profile = await self.profiles.get_item(profile_id)
        return profile, rank

    async def _find_profile(self, score: Score) -> Optional[Profile]:
        try:
            return await self.profiles.get_item(score.profile_id)
        except ItemNotFoundError:
            logger.warning("Score %s references unknown profile %s", score.id, score.profile_id)
            return None
