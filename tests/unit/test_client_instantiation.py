"""
Unit tests for client class instantiation.

These tests verify that client classes can be instantiated without errors
and without touching the network.
"""

import os
from unittest.mock import patch

import pytest

from dummyjson import (
    ApiClient,
    AsyncApiClient,
    AsyncTransport,
    BlockingTransport,
    EphemeralAsyncTransport,
    HTTPConfig,
)


class TestClientInstantiation:
    """Test that all client classes can be instantiated."""

    @pytest.fixture
    def mock_env_local(self, mock_env_clear):
        """Point clients at the local environment via environment variables."""
        with patch.dict(os.environ, {"DUMMYJSON_ENV": "local", "DUMMYJSON_TOKEN": "test_token"}):
            yield

    def test_sync_client_instantiation(self):
        client = ApiClient()
        assert client is not None
        assert isinstance(client._transport, BlockingTransport)
        assert client._transport._client is None

    def test_async_client_instantiation(self):
        client = AsyncApiClient()
        assert isinstance(client._transport, AsyncTransport)

    def test_custom_http_config(self):
        config = HTTPConfig(timeout=5.0, max_connections=4)
        client = ApiClient(config=config)
        assert client._transport.config is config

    def test_ephemeral_transport(self):
        client = AsyncApiClient(transport=EphemeralAsyncTransport())
        assert client._owns_transport is False

    def test_sync_client_from_env(self, mock_env_local):
        client = ApiClient.from_env()
        assert client.server_url == "http://localhost:8080"
        assert client.state.get_token() == "test_token"

    def test_async_client_from_env(self, mock_env_local):
        client = AsyncApiClient.from_env()
        assert client.server_url == "http://localhost:8080"
