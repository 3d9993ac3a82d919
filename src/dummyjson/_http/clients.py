"""Client factory functions for creating pre-configured httpx clients."""

from __future__ import annotations

import httpx

from .config import HTTPConfig


def create_base_client(config: HTTPConfig | None = None) -> httpx.Client:
    """Create a sync httpx client with pool limits and default headers.

    Auth is not configured here; it is applied per request by middleware.

    Args:
        config: Pool and timeout settings. Defaults to ``HTTPConfig()``.

    Returns:
        An httpx.Client ready to be shared across requests.
    """
    effective = config or HTTPConfig()
    return httpx.Client(
        timeout=effective.get_timeout(),
        limits=effective.get_limits(),
        headers=effective.get_headers(),
    )


def create_base_async_client(config: HTTPConfig | None = None) -> httpx.AsyncClient:
    """Create an async httpx client with pool limits and default headers.

    Args:
        config: Pool and timeout settings. Defaults to ``HTTPConfig()``.

    Returns:
        An httpx.AsyncClient ready to be shared across requests.
    """
    effective = config or HTTPConfig()
    return httpx.AsyncClient(
        timeout=effective.get_timeout(),
        limits=effective.get_limits(),
        headers=effective.get_headers(),
    )


__all__ = [
    "create_base_client",
    "create_base_async_client",
]
