"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from yuque.docs.connectors.yuque import YuqueConfig, YuqueRESTConnector

# Skip all integration tests unless RUN_YUQUE_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_YUQUE_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_YUQUE_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def connector():
    """Connector built from YUQUE_API_TOKEN / YUQUE_API_BASE_URL."""
    config = YuqueConfig.from_env()
    if not config.api_token:
        pytest.skip("YUQUE_API_TOKEN is not set")
    async with YuqueRESTConnector(config) as connector:
        yield connector
