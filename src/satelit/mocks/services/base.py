from typing import Optional

from satelit.mocks.harness import MockHarness
from satelit.services.network_error import NetworkError


class MockService:
    """
    Shared plumbing of the mock services: owns a MockHarness and exposes its
    controls. Pass `harness` to drive several services from one harness.
    """

    def __init__(self, delay: Optional[float] = None, harness: Optional[MockHarness] = None):
        self.harness = harness or MockHarness(delay=delay, name=type(self).__name__)

    def set_response_delay(self, delay: float) -> None:
        self.harness.set_response_delay(delay)

    def enqueue_error(self, error: NetworkError) -> None:
        self.harness.enqueue_error(error)

    def close(self) -> None:
        self.harness.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
