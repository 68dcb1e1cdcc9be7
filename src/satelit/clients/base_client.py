from __future__ import annotations

from typing import Optional

from satelit.utils.singleton import SingletonMeta
from .session import SatelitSession


class BaseClient(metaclass=SingletonMeta):
    """
    Singleton HTTP client shared by the real services.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.session = SatelitSession(base_url=base_url, token=token, timeout=timeout)

    def close(self):
        """Clean up resources; the next BaseClient() starts a new session."""
        self.session.close()
        type(self).drop_instance(self)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
