from concurrent.futures import Future
from typing import List, Optional

from satelit.mocks.generators import predefined_articles
from satelit.mocks.services.base import MockService
from satelit.models import Article
from satelit.services.interfaces import AnimeNewsService, Completion
from satelit.services.ordering import sort_articles
from satelit.services.service_result import ServiceResult


class AnimeNewsMockService(MockService, AnimeNewsService):
    """Fake news service which always returns the same list of predefined anime news."""

    def latest_articles(
        self, completion: Optional[Completion[List[Article]]] = None
    ) -> "Future[ServiceResult[List[Article]]]":
        articles = sort_articles(predefined_articles())
        return self.harness.emulate_response(articles, completion)
