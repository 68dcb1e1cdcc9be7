"""
Ordering guarantees of the service interfaces.

Every implementation, real or mock, returns its lists through these helpers
so the documented order holds regardless of what the backing store sends.
"""

from datetime import datetime, timezone
from typing import Iterable, List

from satelit.models import Anime, Article, Trailer

_FAR_FUTURE = datetime.max.replace(tzinfo=timezone.utc)


def _aware(moment: datetime) -> datetime:
    # naive timestamps are treated as UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def sort_articles(articles: Iterable[Article]) -> List[Article]:
    """Most recent article first."""
    return sorted(articles, key=lambda a: _aware(a.published_at), reverse=True)


def sort_ongoings(ongoings: Iterable[Anime]) -> List[Anime]:
    """
    Least time left until the next episode first.

    Shows without a known next episode go last, keeping their relative order.
    """
    return sorted(
        ongoings,
        key=lambda a: _aware(a.next_episode_at) if a.next_episode_at else _FAR_FUTURE,
    )


def sort_trailers(trailers: Iterable[Trailer]) -> List[Trailer]:
    """Most popular trailer first."""
    return sorted(trailers, key=lambda t: t.popularity, reverse=True)
