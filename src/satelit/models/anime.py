from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnimeType(str, Enum):
    TV = "tv"
    OVA = "ova"
    ONA = "ona"
    MOVIE = "movie"
    SPECIAL = "special"


class AiringSeason(str, Enum):
    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"


class AiringStatus(str, Enum):
    UNAIRED = "unaired"
    AIRING = "airing"
    AIRED = "aired"


class Anime(BaseModel):
    """
    An anime show.

    `next_episode_at` is only meaningful for shows that are currently airing;
    the ongoings service orders by it.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    thumbnail_url: str = ""
    type: AnimeType = AnimeType.TV
    season: AiringSeason
    year: int
    airing_status: AiringStatus = AiringStatus.UNAIRED
    score: float = Field(0.0, ge=0.0, le=10.0)
    next_episode_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Anime":
        return cls.model_validate(data)
