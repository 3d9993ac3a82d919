"""Shared fixtures for all tests."""

from collections.abc import Generator

import pytest

from dummyjson import ClientState


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear all DummyJSON-related environment variables for testing.

    This ensures tests don't pick up a developer's local configuration.
    """
    env_vars_to_clear = [
        "DUMMYJSON_ENV",
        "DUMMYJSON_TOKEN",
        "DUMMYJSON_LOGGING",
        "DUMMYJSON_PUBLIC_OPERATIONS",
        "DUMMYJSON_PRODUCTION_URL",
        "DUMMYJSON_LOCAL_URL",
        "DUMMYJSON_TIMEOUT",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_token() -> str:
    """Mock bearer token for testing."""
    return "test_token_123456789"


@pytest.fixture
def state() -> ClientState:
    """Isolated client state; nothing is shared between tests."""
    return ClientState()

