from concurrent.futures import Future
from typing import List, Optional

from satelit.models import Trailer
from satelit.services.api.base_service import ApiService
from satelit.services.interfaces import AnimeTrailersService, Completion
from satelit.services.ordering import sort_trailers
from satelit.services.service_result import ServiceResult


class AnimeTrailersApiService(ApiService[Trailer], AnimeTrailersService):
    """
    Trailers service backed by the Satelit API.

    GET /trailers/featured
    """

    path = "/trailers/featured"
    model = Trailer

    def featured(
        self, completion: Optional[Completion[List[Trailer]]] = None
    ) -> "Future[ServiceResult[List[Trailer]]]":
        return self._fetch(completion)

    def _sort(self, items: List[Trailer]) -> List[Trailer]:
        return sort_trailers(items)
