"""Typed client for the DummyJSON demo REST API."""

from __future__ import annotations

from ._core import (
    ApiClient,
    AsyncApiClient,
    BearerAuthMiddleware,
    ClientState,
    Environment,
    EnvironmentResolver,
    LoggingMiddleware,
    MiddlewareType,
)
from ._http import (
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    EphemeralAsyncTransport,
    HTTPConfig,
)
from .errors import (
    ConfigurationError,
    DummyJSONError,
    NotFoundError,
    UnexpectedResponseError,
)

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "AsyncApiClient",
    "AsyncTransport",
    "BaseTransport",
    "BearerAuthMiddleware",
    "BlockingTransport",
    "ClientState",
    "ConfigurationError",
    "DummyJSONError",
    "Environment",
    "EnvironmentResolver",
    "EphemeralAsyncTransport",
    "HTTPConfig",
    "LoggingMiddleware",
    "MiddlewareType",
    "NotFoundError",
    "UnexpectedResponseError",
]
