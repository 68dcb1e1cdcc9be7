from .anime import Anime, AnimeType, AiringSeason, AiringStatus
from .article import Article
from .trailer import Trailer

__all__ = [
    "Anime",
    "AnimeType",
    "AiringSeason",
    "AiringStatus",
    "Article",
    "Trailer",
]
