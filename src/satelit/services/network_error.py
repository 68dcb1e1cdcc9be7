from __future__ import annotations

import asyncio
import concurrent.futures
import json
from enum import IntEnum
from typing import Optional, Union

import aiohttp
from pydantic import ValidationError


class NetworkError(Exception):
    """
    The only error surfaced by a service call.

    Carries a ``code`` from a closed taxonomy modelled after the gRPC status
    codes (https://github.com/grpc/grpc/blob/master/doc/statuscodes.md) and an
    optional, unlocalized ``message``. Both are read-only once constructed.
    """

    class Code(IntEnum):
        """All possible error codes."""

        CANCELLED = 1
        UNKNOWN = 2
        INVALID_ARGUMENT = 3
        DEADLINE_EXCEEDED = 4
        NOT_FOUND = 5
        ALREADY_EXISTS = 6
        PERMISSION_DENIED = 7
        RESOURCE_EXHAUSTED = 8
        FAILED_PRECONDITION = 9
        ABORTED = 10
        OUT_OF_RANGE = 11
        UNIMPLEMENTED = 12
        INTERNAL = 13
        UNAVAILABLE = 14
        DATA_LOSS = 15
        UNAUTHENTICATED = 16

    def __init__(self, code: Union[Code, int, str], message: Optional[str] = None):
        super().__init__(self._coerce_code(code), message)

    @property
    def code(self) -> NetworkError.Code:
        return self.args[0]

    @property
    def message(self) -> Optional[str]:
        return self.args[1]

    def __setattr__(self, name: str, value) -> None:
        if name in ("code", "message", "args"):
            raise AttributeError(f"NetworkError.{name} is read-only")
        super().__setattr__(name, value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __str__(self) -> str:
        if self.message:
            return f"{self.code.name}: {self.message}"
        return self.code.name

    def __repr__(self) -> str:
        return f"NetworkError(code={self.code.name}, message={self.message!r})"

    @classmethod
    def _coerce_code(cls, code) -> NetworkError.Code:
        if isinstance(code, cls.Code):
            return code
        try:
            if isinstance(code, str):
                return cls.Code[code.strip().upper().replace("-", "_")]
            if isinstance(code, int) and not isinstance(code, bool):
                return cls.Code(code)
        except (KeyError, ValueError):
            pass
        raise ValueError(f"Invalid network error code: {code!r}")

    @classmethod
    def from_http_status(cls, status: int, message: Optional[str] = None) -> NetworkError:
        """
        Map an HTTP status onto the error taxonomy.

        Follows the usual gRPC <-> HTTP correspondence; unmapped 4xx statuses
        become FAILED_PRECONDITION, unmapped 5xx become INTERNAL and anything
        else is UNKNOWN.
        """
        code = _HTTP_STATUS_CODES.get(status)
        if code is None:
            if 400 <= status < 500:
                code = cls.Code.FAILED_PRECONDITION
            elif 500 <= status < 600:
                code = cls.Code.INTERNAL
            else:
                code = cls.Code.UNKNOWN
        return cls(code, message or f"HTTP {status}")

    @classmethod
    def from_exception(cls, exc: BaseException) -> NetworkError:
        """Convert anything raised while talking to the backend into a NetworkError."""
        if isinstance(exc, NetworkError):
            return exc

        message = str(exc) or exc.__class__.__name__
        if isinstance(exc, (asyncio.CancelledError, concurrent.futures.CancelledError)):
            return cls(cls.Code.CANCELLED, message)
        # aiohttp timeouts subclass both TimeoutError and ClientError
        if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
            return cls(cls.Code.DEADLINE_EXCEEDED, message)
        if isinstance(
            exc, (ValidationError, aiohttp.ContentTypeError, json.JSONDecodeError)
        ):
            return cls(cls.Code.INTERNAL, f"Malformed response payload: {message}")
        if isinstance(exc, aiohttp.ClientError):
            return cls(cls.Code.UNAVAILABLE, message)
        return cls(cls.Code.UNKNOWN, message)


_HTTP_STATUS_CODES = {
    400: NetworkError.Code.INVALID_ARGUMENT,
    401: NetworkError.Code.UNAUTHENTICATED,
    403: NetworkError.Code.PERMISSION_DENIED,
    404: NetworkError.Code.NOT_FOUND,
    408: NetworkError.Code.DEADLINE_EXCEEDED,
    409: NetworkError.Code.ALREADY_EXISTS,
    412: NetworkError.Code.FAILED_PRECONDITION,
    416: NetworkError.Code.OUT_OF_RANGE,
    429: NetworkError.Code.RESOURCE_EXHAUSTED,
    499: NetworkError.Code.CANCELLED,
    501: NetworkError.Code.UNIMPLEMENTED,
    503: NetworkError.Code.UNAVAILABLE,
    504: NetworkError.Code.DEADLINE_EXCEEDED,
}
