import pytest


@pytest.fixture
def harness():
    """A MockHarness without latency, closed after the test"""
    from satelit.mocks.harness import MockHarness

    instance = MockHarness(delay=0, name="test")
    yield instance
    instance.close()


@pytest.fixture
def recorder():
    """Factory fixture for completion callbacks that record what they receive"""
    import threading
    import time

    class Recorder:
        def __init__(self):
            self.results = []
            self.times = []
            self._lock = threading.Lock()

        def __call__(self, result):
            with self._lock:
                self.results.append(result)
                self.times.append(time.monotonic())

    return Recorder
