from .harness import MockHarness
from .services import (
    AnimeNewsMockService,
    AnimeOngoingsMockService,
    AnimeTrailersMockService,
    MockService,
)

__all__ = [
    "MockHarness",
    "MockService",
    "AnimeNewsMockService",
    "AnimeOngoingsMockService",
    "AnimeTrailersMockService",
]
