"""
Shared fixtures for the advice proxy tests.
"""

import pytest
from fastapi.testclient import TestClient

from advice_proxy.api.app import create_app
from advice_proxy.config import Settings
from tests.fakes import FakeAdviceProvider


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        advice_api_url="https://advice.invalid/advice",
        upstream_timeout=1.0,
        request_timeout=2.0,
        log_level="DEBUG",
        log_file=None,
    )


@pytest.fixture
def provider() -> FakeAdviceProvider:
    return FakeAdviceProvider()


@pytest.fixture
def client(test_settings, provider):
    """Create a test client with the lifespan running."""
    app = create_app(settings=test_settings, advice_provider=provider)
    with TestClient(app) as test_client:
        yield test_client
