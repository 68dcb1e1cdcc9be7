from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar, Optional

from satelit.services.network_error import NetworkError

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    A uniform result object for every service call.
      - success=True: `data` holds the fetched value, `error` is None
      - success=False: `error` holds the NetworkError, `data` is None
    Exactly one arm is populated.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[NetworkError] = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful ServiceResult cannot carry an error")
        if not self.success and not isinstance(self.error, NetworkError):
            raise ValueError("A failed ServiceResult requires a NetworkError")
        if not self.success and self.data is not None:
            raise ValueError("A failed ServiceResult cannot carry data")

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        """Use when the call produced its value."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: NetworkError) -> ServiceResult[T]:
        """Use when the call failed; the error is delivered instead of data."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Return the value of a successful result or raise its NetworkError."""
        if not self.success:
            raise self.error
        return self.data

    def __repr__(self) -> str:
        # represent presence of data with an ellipsis, absence with None
        data_repr = "…" if self.data is not None else "None"
        return f"<ServiceResult success={self.success!r} error={self.error!r} data={data_repr}>"
