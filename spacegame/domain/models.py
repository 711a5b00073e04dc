"""Pydantic models mirroring the camelCase JSON documents."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

GAME_MODES = ("Solo", "Duo", "Trio")
GAME_REGIONS = ("Milky Way", "Andromeda", "Pinwheel", "NGC 1300", "Messier 82")


class Model(BaseModel):
    """Base document: anything stored in a repository carries an ``id``."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str


class Score(Model):
    profile_id: str = Field(alias="profileId")
    high_score: int = Field(alias="score")
    game_mode: str = Field(default="", alias="gameMode")
    game_region: str = Field(default="", alias="gameRegion")


class Profile(Model):
    user_name: str = Field(alias="userName")
    avatar_url: str = Field(default="", alias="avatarUrl")
    achievements: tuple[str, ...] = ()
