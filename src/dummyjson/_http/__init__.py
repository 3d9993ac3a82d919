"""Shared HTTP infrastructure for DummyJSON API clients."""

from .clients import create_base_async_client, create_base_client
from .config import DEFAULT_TIMEOUT, HTTPConfig
from .iter_coroutine import iter_coroutine
from .transport import (
    APIRequest,
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    EphemeralAsyncTransport,
    JSONBody,
    RequestBody,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "HTTPConfig",
    "iter_coroutine",
    "APIRequest",
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "EphemeralAsyncTransport",
    "JSONBody",
    "RequestBody",
    "create_base_client",
    "create_base_async_client",
]
