"""HTTP configuration shared by the DummyJSON transports."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

# No timeout unless one is configured.
DEFAULT_TIMEOUT: float | None = None
DEFAULT_MAX_CONNECTIONS = 100
DEFAULT_MAX_KEEPALIVE_CONNECTIONS = 20
DEFAULT_KEEPALIVE_EXPIRY = 5.0


@dataclass
class HTTPConfig:
    """Connection-pool and request defaults for a transport."""

    timeout: float | None = DEFAULT_TIMEOUT
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    max_keepalive_connections: int = DEFAULT_MAX_KEEPALIVE_CONNECTIONS
    keepalive_expiry: float = DEFAULT_KEEPALIVE_EXPIRY
    default_headers: dict[str, str] = field(default_factory=dict)

    def get_headers(self) -> dict[str, str]:
        """Build the headers sent with every request."""
        return {
            "accept": "application/json",
            **self.default_headers,
        }

    def get_limits(self) -> httpx.Limits:
        return httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive_connections,
            keepalive_expiry=self.keepalive_expiry,
        )

    def get_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout)


__all__ = [
    "HTTPConfig",
    "DEFAULT_TIMEOUT",
    "DEFAULT_MAX_CONNECTIONS",
    "DEFAULT_MAX_KEEPALIVE_CONNECTIONS",
    "DEFAULT_KEEPALIVE_EXPIRY",
]
