from __future__ import annotations

import asyncio
import logging
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any, ClassVar, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from satelit.clients.base_client import BaseClient
from satelit.services.interfaces import Completion
from satelit.services.network_error import NetworkError
from satelit.services.service_result import ServiceResult

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ApiService(ABC, Generic[T]):
    """
    Base class for the services backed by the Satelit API.

    Every fetch runs on the client's session loop and completes exactly once:
    the completion (if any) is called with the ServiceResult, then the
    returned future resolves with it. Whatever goes wrong on the way is
    converted into a NetworkError and delivered as a failed result.
    """

    path: ClassVar[str]
    model: ClassVar[Type[BaseModel]]

    def __init__(self, client: Optional[BaseClient] = None):
        self.client = client or BaseClient()

    def _fetch(
        self, completion: Optional[Completion[List[T]]] = None
    ) -> Future[ServiceResult[List[T]]]:
        outer: Future[ServiceResult[List[T]]] = Future()
        outer.set_running_or_notify_cancel()

        try:
            inner = self.client.session.submit(self._run())
        except NetworkError as e:
            logger.warning("GET %s refused: %s", self.path, e)
            inner = Future()
            inner.set_exception(e)
            # completions never run on the caller's thread
            threading.Thread(
                target=self._deliver,
                args=(inner, outer, completion),
                name="satelit-deliver",
                daemon=True,
            ).start()
            return outer

        inner.add_done_callback(lambda done: self._deliver(done, outer, completion))
        return outer

    async def _run(self) -> ServiceResult[List[T]]:
        try:
            resp = await self.client.session.async_request("GET", self.path)
            items = [self.model.model_validate(item) for item in self._items(resp.json())]
            return ServiceResult.ok(self._sort(items))
        except (Exception, asyncio.CancelledError) as e:
            error = NetworkError.from_exception(e)
            logger.warning("GET %s failed: %s", self.path, error)
            return ServiceResult.fail(error)

    @staticmethod
    def _items(body: Any) -> List[Any]:
        """Accept either a bare JSON list or an object wrapping it under `items`."""
        if isinstance(body, dict):
            body = body.get("items")
        if not isinstance(body, list):
            raise NetworkError(
                NetworkError.Code.INTERNAL,
                f"Unexpected response payload: expected a list, got {type(body).__name__}",
            )
        return body

    @staticmethod
    def _deliver(
        done: Future,
        outer: Future,
        completion: Optional[Completion[List[T]]],
    ) -> None:
        try:
            result = done.result()
        except Exception as e:
            # cancelled by a closing session, or the loop failed the request
            result = ServiceResult.fail(NetworkError.from_exception(e))

        try:
            if completion is not None:
                completion(result)
        except Exception:
            logger.exception("Completion callback failed")
        finally:
            outer.set_result(result)

    @abstractmethod
    def _sort(self, items: List[T]) -> List[T]:
        """Apply the ordering the service interface promises."""
