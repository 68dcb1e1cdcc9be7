from .anime_news import AnimeNewsApiService
from .anime_ongoings import AnimeOngoingsApiService
from .anime_trailers import AnimeTrailersApiService
from .base_service import ApiService

__all__ = [
    "ApiService",
    "AnimeNewsApiService",
    "AnimeOngoingsApiService",
    "AnimeTrailersApiService",
]
