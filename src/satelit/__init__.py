from satelit.services import (
    AnimeNewsService,
    AnimeOngoingsService,
    AnimeTrailersService,
    NetworkError,
    ServiceResult,
)

__all__ = [
    "AnimeNewsService",
    "AnimeOngoingsService",
    "AnimeTrailersService",
    "NetworkError",
    "ServiceResult",
]
