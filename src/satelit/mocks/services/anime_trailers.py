from concurrent.futures import Future
from typing import List, Optional

from satelit.mocks.generators import predefined_trailers
from satelit.mocks.services.base import MockService
from satelit.models import Trailer
from satelit.services.interfaces import AnimeTrailersService, Completion
from satelit.services.ordering import sort_trailers
from satelit.services.service_result import ServiceResult


class AnimeTrailersMockService(MockService, AnimeTrailersService):
    """Fake trailers service which always returns the same list of predefined trailers."""

    def featured(
        self, completion: Optional[Completion[List[Trailer]]] = None
    ) -> "Future[ServiceResult[List[Trailer]]]":
        trailers = sort_trailers(predefined_trailers())
        return self.harness.emulate_response(trailers, completion)
