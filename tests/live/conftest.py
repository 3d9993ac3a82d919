"""Fixtures for live API tests.

These tests call the public DummyJSON API and only run when
``DUMMYJSON_LIVE=1`` is set in the environment.
"""

import os

import pytest


@pytest.fixture
def live_credentials() -> tuple[str, str]:
    """Demo credentials published by DummyJSON."""
    return os.getenv("DUMMYJSON_USERNAME", "emilys"), os.getenv("DUMMYJSON_PASSWORD", "emilyspass")
