from .base_client import BaseClient
from .session import SatelitResponse, SatelitSession

__all__ = ["BaseClient", "SatelitResponse", "SatelitSession"]
