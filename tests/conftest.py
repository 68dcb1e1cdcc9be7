"""
Runs during test collection. You can also supply fixtures here that should be loaded
before each test
"""

import os, sys, pytest

# Ensure src/ is on sys.path before any imports of your app code
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

os.environ["SATELIT_BASE_URL"] = "https://example.com/api"
os.environ["SATELIT_MOCK_RESPONSE_DELAY"] = "0"


# Lazy‐import NetworkError
@pytest.fixture
def network_error():
    """Factory fixture for creating NetworkErrors by code name"""
    from satelit.services.network_error import NetworkError

    def _make_error(code="unknown", message=None):
        return NetworkError(code, message)

    return _make_error


# --- Service Result Fixtures --- #


@pytest.fixture
def ok_service_result():
    """Factory fixture for creating successful ServiceResult objects"""
    from satelit.services.service_result import ServiceResult

    def _make_result(data):
        return ServiceResult.ok(data=data)

    return _make_result


@pytest.fixture
def fail_service_result(network_error):
    """Factory fixture for creating failed ServiceResult objects"""
    from satelit.services.service_result import ServiceResult

    def _make_result(code="unknown", message=None):
        return ServiceResult.fail(network_error(code, message))

    return _make_result
