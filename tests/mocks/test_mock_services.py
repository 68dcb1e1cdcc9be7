import gc
import threading
import time
from datetime import datetime, timezone

import pytest

from satelit.mocks import (
    AnimeNewsMockService,
    AnimeOngoingsMockService,
    AnimeTrailersMockService,
    MockHarness,
)
from satelit.models import AiringStatus
from satelit.services.interfaces import (
    AnimeNewsService,
    AnimeOngoingsService,
    AnimeTrailersService,
)
from satelit.services.network_error import NetworkError

Code = NetworkError.Code


@pytest.fixture
def news():
    with AnimeNewsMockService(delay=0) as service:
        yield service


@pytest.fixture
def ongoings():
    clock = lambda: datetime(2024, 4, 1, 12, 0, tzinfo=timezone.utc)
    with AnimeOngoingsMockService(delay=0, clock=clock) as service:
        yield service


@pytest.fixture
def trailers():
    with AnimeTrailersMockService(delay=0) as service:
        yield service


def test_mocks_implement_interfaces(news, ongoings, trailers):
    assert isinstance(news, AnimeNewsService)
    assert isinstance(ongoings, AnimeOngoingsService)
    assert isinstance(trailers, AnimeTrailersService)


def test_latest_articles_most_recent_first(news):
    result = news.latest_articles().result(timeout=5)

    assert result.success is True
    assert len(result.data) == 3
    published = [a.published_at for a in result.data]
    assert published == sorted(published, reverse=True)


def test_ongoings_are_airing_this_year_and_sorted(ongoings):
    result = ongoings.ongoings().result(timeout=5)

    assert result.success is True
    assert len(result.data) == 10
    assert all(a.airing_status is AiringStatus.AIRING for a in result.data)
    assert all(a.year == 2024 for a in result.data)
    next_episodes = [a.next_episode_at for a in result.data]
    assert next_episodes == sorted(next_episodes)
    assert result.data[0].name == "Ore no Imouto ga Konna ni Kawaii Wake ga Nai."


def test_featured_trailers_most_popular_first(trailers):
    result = trailers.featured().result(timeout=5)

    assert result.success is True
    assert len(result.data) == 10
    popularity = [t.popularity for t in result.data]
    assert popularity == sorted(popularity, reverse=True)
    assert result.data[0].anime.name == "Code Geass: Hangyaku no Lelouch"


def test_enqueued_error_is_delivered_through_completion(news):
    error = NetworkError(Code.UNAUTHENTICATED, "token expired")
    news.enqueue_error(error)
    received = []

    result = news.latest_articles(received.append).result(timeout=5)

    assert result.success is False
    assert result.error == error
    assert received == [result]
    assert news.latest_articles().result(timeout=5).success is True


def test_services_do_not_share_error_queues(news, trailers):
    news.enqueue_error(NetworkError(Code.UNAVAILABLE))

    assert trailers.featured().result(timeout=5).success is True
    assert news.latest_articles().result(timeout=5).success is False


def test_set_response_delay_is_forwarded(trailers):
    import time

    trailers.set_response_delay(0.1)
    issued = time.monotonic()
    trailers.featured().result(timeout=5)

    assert time.monotonic() - issued >= 0.09


def test_services_can_share_a_harness():
    with MockHarness(delay=0, name="shared") as harness:
        news = AnimeNewsMockService(harness=harness)
        trailers = AnimeTrailersMockService(harness=harness)
        news.enqueue_error(NetworkError(Code.ABORTED))

        assert trailers.featured().result(timeout=5).error.code is Code.ABORTED
        assert news.latest_articles().result(timeout=5).success is True


def test_closed_service_rejects_calls():
    service = AnimeNewsMockService(delay=0)
    service.close()

    with pytest.raises(RuntimeError):
        service.latest_articles()


def test_dropped_services_do_not_leak_threads():
    gc.collect()
    before = threading.active_count()

    for _ in range(30):
        AnimeNewsMockService(delay=0).latest_articles().result(timeout=5)
    gc.collect()

    deadline = time.monotonic() + 5
    while threading.active_count() > before and time.monotonic() < deadline:
        time.sleep(0.01)
    assert threading.active_count() <= before
