from .anime_news import AnimeNewsMockService
from .anime_ongoings import AnimeOngoingsMockService
from .anime_trailers import AnimeTrailersMockService
from .base import MockService

__all__ = [
    "AnimeNewsMockService",
    "AnimeOngoingsMockService",
    "AnimeTrailersMockService",
    "MockService",
]
