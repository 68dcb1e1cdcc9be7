import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest


@pytest.fixture
def fake_response():
    """Factory fixture for creating fake HTTP responses"""

    class FakeResponse:
        def __init__(self, status_code=200, json_data=None, text=""):
            self.ok = 200 <= status_code < 300
            self.status_code = status_code
            self._json_data = json_data
            self.text = text

        def json(self):
            if isinstance(self._json_data, Exception):
                raise self._json_data
            return self._json_data

    return FakeResponse


@pytest.fixture
def dummy_client(fake_response):
    """Factory fixture for creating dummy API clients"""
    executors = []

    class DummySession:
        def __init__(self, response):
            self._response = response
            self.calls = []
            self._executor = ThreadPoolExecutor(max_workers=1)
            executors.append(self._executor)

        def submit(self, coro):
            # runs the coroutine off the caller's thread, like the session loop
            return self._executor.submit(asyncio.run, coro)

        async def async_request(self, method, url, **kwargs):
            self.calls.append((method, url, kwargs or None))
            if isinstance(self._response, BaseException):
                raise self._response
            return self._response

    class DummyClient:
        def __init__(self, response):
            self.session = DummySession(response)

        @property
        def calls(self):
            return self.session.calls

    def _make_client(response):
        if isinstance(response, (list, dict)):
            # If JSON is provided, create a successful response
            return DummyClient(fake_response(status_code=200, json_data=response))
        return DummyClient(response)

    yield _make_client

    for executor in executors:
        executor.shutdown(wait=True)


@pytest.fixture
def article_json():
    """Wire representation of news articles, deliberately out of order"""
    return [
        {
            "title": "Older",
            "summary": "s1",
            "source": "AnimeNewsNetwork",
            "sourceUrl": "https://example.com/1",
            "likes": 3,
            "publishedAt": "2020-06-09T10:00:00Z",
        },
        {
            "title": "Newest",
            "summary": "s2",
            "source": "AnimeNewsNetwork",
            "sourceUrl": "https://example.com/2",
            "likes": 10,
            "publishedAt": "2020-06-09T12:00:00Z",
        },
        {
            "title": "Oldest",
            "summary": "s3",
            "source": "Crunchyroll",
            "sourceUrl": "https://example.com/3",
            "likes": 0,
            "publishedAt": "2020-06-08T08:00:00Z",
        },
    ]


@pytest.fixture
def anime_json():
    """Wire representation of airing shows, deliberately out of order"""
    return [
        {
            "name": "Kakushigoto",
            "thumbnailUrl": "https://cdn-eu.anidb.net/images/main/244800.jpg",
            "type": "tv",
            "season": "spring",
            "year": 2020,
            "airingStatus": "airing",
            "score": 6.75,
            "nextEpisodeAt": "2020-06-12T15:00:00Z",
        },
        {
            "name": "BNA",
            "thumbnailUrl": "https://cdn-eu.anidb.net/images/main/244892.jpg",
            "type": "ona",
            "season": "spring",
            "year": 2020,
            "airingStatus": "airing",
            "score": 7.4,
        },
        {
            "name": "Yuru Yuri Ten",
            "thumbnailUrl": "https://cdn-eu.anidb.net/images/main/237553.jpg",
            "type": "ova",
            "season": "fall",
            "year": 2020,
            "airingStatus": "airing",
            "score": 7.15,
            "nextEpisodeAt": "2020-06-10T09:30:00Z",
        },
    ]


@pytest.fixture
def trailer_json(anime_json):
    """Wire representation of trailers, deliberately out of order"""
    return [
        {"anime": anime_json[0], "videoUrl": "https://youtu.be/a", "popularity": 10},
        {"anime": anime_json[1], "videoUrl": "https://youtu.be/b", "popularity": 5000},
        {"anime": anime_json[2], "videoUrl": "https://youtu.be/c", "popularity": 420},
    ]
