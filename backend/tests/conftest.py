import pytest
from fastapi.testclient import TestClient

from powgate.main import app
from powgate.middleware.rate_limit import limiter
from powgate.services.pow_service import PowGate

TEST_SIGNATURE_KEY = b"secret"


@pytest.fixture
def signature_key():
    return TEST_SIGNATURE_KEY


@pytest.fixture
def gate(signature_key):
    return PowGate(signature_key=signature_key)


@pytest.fixture
def client():
    """Create a test client with rate limiting disabled."""
    limiter.enabled = False

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    limiter.enabled = True
