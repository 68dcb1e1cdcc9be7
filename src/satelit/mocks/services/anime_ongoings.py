from concurrent.futures import Future
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from satelit.mocks.generators import predefined_animes
from satelit.mocks.harness import MockHarness
from satelit.mocks.services.base import MockService
from satelit.models import Anime, AiringStatus
from satelit.services.interfaces import AnimeOngoingsService, Completion
from satelit.services.ordering import sort_ongoings
from satelit.services.service_result import ServiceResult

# hours until the next episode, per predefined show
_NEXT_EPISODE_IN_HOURS = [30, 4, 101, 52, 9, 140, 77, 1, 18, 63]


class AnimeOngoingsMockService(MockService, AnimeOngoingsService):
    """Fake ongoings service which always returns the same list of predefined anime shows."""

    def __init__(
        self,
        delay: Optional[float] = None,
        harness: Optional[MockHarness] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        super().__init__(delay=delay, harness=harness)
        self._clock = clock

    def ongoings(
        self, completion: Optional[Completion[List[Anime]]] = None
    ) -> "Future[ServiceResult[List[Anime]]]":
        now = self._clock()
        ongoings = [
            self._make_ongoing(anime, now, hours)
            for anime, hours in zip(predefined_animes(), _NEXT_EPISODE_IN_HOURS)
        ]
        return self.harness.emulate_response(sort_ongoings(ongoings), completion)

    @staticmethod
    def _make_ongoing(anime: Anime, now: datetime, hours: int) -> Anime:
        """Return a copy of the show marked as airing this year."""
        return anime.model_copy(
            update={
                "airing_status": AiringStatus.AIRING,
                "year": now.year,
                "next_episode_at": now + timedelta(hours=hours),
            }
        )
