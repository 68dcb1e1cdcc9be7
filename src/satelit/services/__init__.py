from .network_error import NetworkError
from .service_result import ServiceResult
from .interfaces import AnimeNewsService, AnimeOngoingsService, AnimeTrailersService

__all__ = [
    "NetworkError",
    "ServiceResult",
    "AnimeNewsService",
    "AnimeOngoingsService",
    "AnimeTrailersService",
]
