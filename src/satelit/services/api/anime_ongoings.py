from concurrent.futures import Future
from typing import List, Optional

from satelit.models import Anime
from satelit.services.api.base_service import ApiService
from satelit.services.interfaces import AnimeOngoingsService, Completion
from satelit.services.ordering import sort_ongoings
from satelit.services.service_result import ServiceResult


class AnimeOngoingsApiService(ApiService[Anime], AnimeOngoingsService):
    """
    Ongoings service backed by the Satelit API.

    GET /anime/ongoings
    """

    path = "/anime/ongoings"
    model = Anime

    def ongoings(
        self, completion: Optional[Completion[List[Anime]]] = None
    ) -> "Future[ServiceResult[List[Anime]]]":
        return self._fetch(completion)

    def _sort(self, items: List[Anime]) -> List[Anime]:
        return sort_ongoings(items)
