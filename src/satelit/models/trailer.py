from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from satelit.models.anime import Anime


class Trailer(BaseModel):
    """A trailer video of an anime show."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    anime: Anime
    video_url: str
    popularity: int = Field(0, ge=0, description="View count, used for ordering")

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Trailer":
        return cls.model_validate(data)
