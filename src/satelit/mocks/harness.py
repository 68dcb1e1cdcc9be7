from __future__ import annotations

import asyncio
import logging
import threading
import weakref
from concurrent.futures import Future
from typing import Callable, List, Optional, TypeVar

from satelit.config.settings import get_settings
from satelit.services.network_error import NetworkError
from satelit.services.service_result import ServiceResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MockHarness:
    """
    Emulates network behaviour for mock services.

    A mock service holds one harness and routes every fetch through
    `emulate_response`. The harness owns a private event loop running on its
    own thread; all three public operations are handed to that loop in the
    order they are issued, so the delay and the error stack of one harness are
    only ever touched from a single thread. Harnesses share nothing.
    A harness dropped without close() stops its worker once its scheduled
    responses have been delivered.

    Queued errors are consumed last-in, first-out: the most recently enqueued
    error is the one the next response fails with.

    Usage:
        harness = MockHarness(delay=0.1)
        harness.enqueue_error(NetworkError(NetworkError.Code.UNAVAILABLE))
        result = harness.emulate_response([1, 2, 3]).result()
    """

    def __init__(self, delay: Optional[float] = None, name: str = "mock"):
        if delay is None:
            delay = get_settings().mock_response_delay
        self._delay: float = _check_delay(delay)
        self._errors: List[NetworkError] = []
        self._pending = 0
        self._draining = False

        self.name = name
        self._closed = False
        self._submit_lock = threading.Lock()

        # the worker thread must not reference the harness, or it is never freed
        self._loop = asyncio.new_event_loop()
        self._loop_thread = threading.Thread(
            target=_run_loop, args=(self._loop,), name=f"satelit-{name}", daemon=True
        )
        self._loop_thread.start()
        self._finalizer = weakref.finalize(self, _stop_loop, self._loop)

    # Public operations, callable from any thread

    def set_response_delay(self, delay: float) -> None:
        """
        Set the delay, in seconds, of every response emulated from now on.

        Responses that are already scheduled keep the delay they were issued with.
        """
        self._submit(self._apply_delay, _check_delay(delay))

    def enqueue_error(self, error: NetworkError) -> None:
        """Queue an error to respond with on a future emulated response."""
        if not isinstance(error, NetworkError):
            raise TypeError(f"Expected a NetworkError, got {type(error).__name__}")
        self._submit(self._push_error, error)

    def emulate_response(
        self,
        data: T,
        completion: Optional[Callable[[ServiceResult[T]], None]] = None,
    ) -> Future[ServiceResult[T]]:
        """
        Emulate a service response carrying `data`.

        If an error is queued, the response carries that error instead.
        The call returns immediately; the result is delivered once the current
        delay has elapsed, exactly once, to both `completion` and the returned
        future. Delivery cannot be cancelled.
        """
        future: Future[ServiceResult[T]] = Future()
        # a running future refuses cancel()
        future.set_running_or_notify_cancel()
        self._submit(self._respond, data, future, completion)
        return future

    @property
    def pending(self) -> int:
        """Number of responses scheduled but not yet delivered."""
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self, wait: bool = True) -> None:
        """
        Stop accepting calls and shut the worker down once every scheduled
        response has been delivered.
        """
        with self._submit_lock:
            if self._closed:
                return
            self._closed = True
            self._finalizer.detach()
            self._loop.call_soon_threadsafe(self._drain)

        if wait and threading.current_thread() is not self._loop_thread:
            self._loop_thread.join()

    def __enter__(self) -> MockHarness:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # Worker side, only ever runs on the harness loop

    def _submit(self, fn: Callable, *args) -> None:
        with self._submit_lock:
            if self._closed:
                raise RuntimeError(f"MockHarness {self.name!r} is closed")
            self._loop.call_soon_threadsafe(fn, *args)

    def _apply_delay(self, delay: float) -> None:
        logger.debug("%s: response delay set to %.3fs", self.name, delay)
        self._delay = delay

    def _push_error(self, error: NetworkError) -> None:
        self._errors.append(error)
        logger.debug(
            "%s: queued %r (%d queued)", self.name, error, len(self._errors)
        )

    def _respond(
        self,
        data: T,
        future: Future[ServiceResult[T]],
        completion: Optional[Callable[[ServiceResult[T]], None]],
    ) -> None:
        error = self._errors.pop() if self._errors else None
        result = ServiceResult.fail(error) if error is not None else ServiceResult.ok(data)

        self._pending += 1
        self._loop.call_later(self._delay, self._deliver, result, future, completion)

    def _deliver(
        self,
        result: ServiceResult[T],
        future: Future[ServiceResult[T]],
        completion: Optional[Callable[[ServiceResult[T]], None]],
    ) -> None:
        self._pending -= 1
        logger.debug("%s: delivering %r", self.name, result)
        try:
            if completion is not None:
                completion(result)
        except Exception:
            logger.exception("%s: completion callback failed", self.name)
        finally:
            future.set_result(result)

        if self._draining and self._pending == 0:
            self._loop.stop()

    def _drain(self) -> None:
        self._draining = True
        if self._pending == 0:
            self._loop.stop()


def _check_delay(delay: float) -> float:
    delay = float(delay)
    if delay < 0:
        raise ValueError(f"Response delay must not be negative, got {delay}")
    return delay


def _run_loop(loop: asyncio.AbstractEventLoop) -> None:
    asyncio.set_event_loop(loop)
    try:
        loop.run_forever()
    finally:
        loop.close()


def _stop_loop(loop: asyncio.AbstractEventLoop) -> None:
    """Stop the worker of a harness that was dropped without close()."""
    try:
        loop.call_soon_threadsafe(loop.stop)
    except RuntimeError:
        # loop already closed
        pass
