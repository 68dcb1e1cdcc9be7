from __future__ import annotations

import asyncio
import json
import logging
import sys
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Coroutine, Dict, Optional

import aiohttp
from satelit.config.settings import get_settings
from satelit.services.network_error import NetworkError

logger = logging.getLogger(__name__)


@dataclass
class SatelitResponse:
    """
    Response of a Satelit API call, read in full before the connection is released.
    """

    status_code: int
    headers: Dict[str, str]
    url: str
    text: str = ""
    _json_data: Optional[Any] = None

    @property
    def ok(self) -> bool:
        """Check if response was successful (2xx status)."""
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Parse response as JSON."""
        if self._json_data is not None:
            return self._json_data
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        """Raise the matching NetworkError for non-2xx statuses."""
        if not self.ok:
            message = f"HTTP {self.status_code}"
            if self.text:
                message = f"{message}: {self.text}"
            raise NetworkError.from_http_status(self.status_code, message)


class SatelitSession:
    """Async session for Satelit API interactions, driven from a background loop."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.base_url = str(base_url or settings.base_url).rstrip("/")
        self.token = token or settings.api_token
        self.timeout = timeout or settings.request_timeout
        self.headers = {"Accept": "application/json"}
        if self.token:
            self.headers["Authorization"] = f"Bearer {self.token}"
        self.proxies = settings.proxy_servers or {}

        self._session: Optional[aiohttp.ClientSession] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._loop_thread: Optional[threading.Thread] = None
        self._loop_started = threading.Event()
        self._closed = False
        self._close_lock = threading.Lock()

        self._start_loop_thread()

    def _start_loop_thread(self):
        """Start background thread with event loop."""

        def run_loop():
            self._loop = asyncio.new_event_loop()
            asyncio.set_event_loop(self._loop)
            # only signal once the loop is actually running
            self._loop.call_soon(self._loop_started.set)
            try:
                self._loop.run_forever()
            finally:
                self._loop.close()

        self._loop_thread = threading.Thread(
            target=run_loop, name="satelit-session", daemon=True
        )
        self._loop_thread.start()
        self._loop_started.wait()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Create the aiohttp session on first use, inside the session loop."""
        if self._session is None:
            connector_kwargs = {
                "limit": 100,
                "limit_per_host": 30,
                "keepalive_timeout": 30,
            }

            if sys.version_info < (3, 12, 9):
                connector_kwargs["enable_cleanup_closed"] = True

            connector = aiohttp.TCPConnector(**connector_kwargs)
            timeout = aiohttp.ClientTimeout(total=self.timeout, connect=10)

            self._session = aiohttp.ClientSession(
                headers=self.headers, connector=connector, timeout=timeout
            )
        return self._session

    @property
    def closed(self) -> bool:
        return self._closed or not self._loop.is_running()

    def submit(self, coro: Coroutine) -> Future:
        """
        Schedule a coroutine on the session loop without blocking the caller.

        Raises an UNAVAILABLE NetworkError once the session is closed; the
        coroutine is closed unstarted in that case.
        """
        with self._close_lock:
            if self.closed:
                coro.close()
                raise NetworkError(
                    NetworkError.Code.UNAVAILABLE, "Client session is closed"
                )
            return asyncio.run_coroutine_threadsafe(coro, self._loop)

    async def async_request(self, method: str, url: str, **kwargs) -> SatelitResponse:
        """Make async HTTP request; raises NetworkError on non-2xx responses."""
        session = await self._ensure_session()
        request_kwargs = self._build_request_kwargs(**kwargs)
        full_url = (
            url if url.startswith("http") else f"{self.base_url}/{url.lstrip('/')}"
        )
        logger.debug("%s %s", method.upper(), full_url)

        async with session.request(method, full_url, **request_kwargs) as response:
            satelit_response = SatelitResponse(
                status_code=response.status,
                headers=dict(response.headers),
                url=str(response.url),
            )
            satelit_response.text = await response.text()
            satelit_response.raise_for_status()

            content_type = response.headers.get("content-type", "").lower()
            if "application/json" in content_type and satelit_response.text:
                satelit_response._json_data = json.loads(satelit_response.text)
            return satelit_response

    def _build_request_kwargs(self, **kwargs) -> dict:
        """Build request kwargs for aiohttp."""
        request_kwargs = {}

        if "json" in kwargs:
            request_kwargs["json"] = kwargs["json"]
        if "params" in kwargs:
            request_kwargs["params"] = kwargs["params"]

        if self.proxies:
            request_kwargs["proxy"] = self.proxies.get(
                "https", self.proxies.get("http")
            )

        if "headers" in kwargs:
            headers = dict(self.headers)
            headers.update(kwargs["headers"])
            request_kwargs["headers"] = headers

        return request_kwargs

    def close(self):
        """
        Close session and clean up resources.

        Requests still in flight are cancelled, so their futures resolve
        instead of waiting on a loop that no longer runs.
        """
        with self._close_lock:
            if self._closed:
                return
            self._closed = True

        if self._loop.is_running():
            asyncio.run_coroutine_threadsafe(self._shutdown(), self._loop).result()
            self._loop.call_soon_threadsafe(self._loop.stop)
        self._loop_thread.join()

    async def _shutdown(self):
        current = asyncio.current_task()
        tasks = [task for task in asyncio.all_tasks() if task is not current]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        if self._session:
            await self._session.close()
            self._session = None
        logger.debug(
            "Session for %s closed, %d request(s) cancelled", self.base_url, len(tasks)
        )
