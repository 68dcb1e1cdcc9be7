from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Callable, List, Optional, TypeVar

from satelit.models import Anime, Article, Trailer
from satelit.services.service_result import ServiceResult

T = TypeVar("T")

Completion = Callable[[ServiceResult[T]], None]


class AnimeNewsService(ABC):
    """Represents a service that can fetch anime news."""

    @abstractmethod
    def latest_articles(
        self, completion: Optional[Completion[List[Article]]] = None
    ) -> "Future[ServiceResult[List[Article]]]":
        """
        Fetch the latest anime news articles.

        The list is sorted starting from the most recent article.

        Args:
            completion: called exactly once with the result

        Returns:
            A future resolved with the same result the completion receives.
        """


class AnimeOngoingsService(ABC):
    """A service to fetch anime shows that are currently airing."""

    @abstractmethod
    def ongoings(
        self, completion: Optional[Completion[List[Anime]]] = None
    ) -> "Future[ServiceResult[List[Anime]]]":
        """
        Fetch the currently airing anime shows.

        The list is sorted by how much time is left until the next episode.
        """


class AnimeTrailersService(ABC):
    """A service that can fetch anime trailers."""

    @abstractmethod
    def featured(
        self, completion: Optional[Completion[List[Trailer]]] = None
    ) -> "Future[ServiceResult[List[Trailer]]]":
        """
        Fetch the featured anime trailers.

        The list is sorted by popularity starting with the most popular one.
        """
