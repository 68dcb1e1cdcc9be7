from concurrent.futures import Future
from typing import List, Optional

from satelit.models import Article
from satelit.services.api.base_service import ApiService
from satelit.services.interfaces import AnimeNewsService, Completion
from satelit.services.ordering import sort_articles
from satelit.services.service_result import ServiceResult


class AnimeNewsApiService(ApiService[Article], AnimeNewsService):
    """
    News service backed by the Satelit API.

    GET /news/latest
    """

    path = "/news/latest"
    model = Article

    def latest_articles(
        self, completion: Optional[Completion[List[Article]]] = None
    ) -> "Future[ServiceResult[List[Article]]]":
        return self._fetch(completion)

    def _sort(self, items: List[Article]) -> List[Article]:
        return sort_articles(items)
