from datetime import datetime
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Article(BaseModel):
    """
    An anime news article as returned by the news service.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    summary: str = ""
    source: str = ""
    source_url: str = Field("", description="Link to the full article on the source website")
    likes: int = Field(0, ge=0)
    published_at: datetime = Field(..., description="Publication time, used for ordering")

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Article":
        return cls.model_validate(data)
