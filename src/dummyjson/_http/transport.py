"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

import abc
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from .clients import create_base_async_client, create_base_client
from .config import HTTPConfig


@dataclass(frozen=True, slots=True)
class JSONBody:
    """JSON request body - automatically sets Content-Type to application/json."""

    data: Any


RequestBody = JSONBody | None


@dataclass(frozen=True, slots=True)
class APIRequest:
    """A fully-formed request as seen by middleware and transports.

    Instances are immutable; middleware derives modified copies with
    :meth:`with_headers`.
    """

    method: str
    url: str
    params: Mapping[str, Any] | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    body: RequestBody = None
    timeout: float | None = None

    def with_headers(self, headers: Mapping[str, str]) -> APIRequest:
        return dataclasses.replace(self, headers={**self.headers, **headers})


def _request_kwargs(request: APIRequest) -> dict[str, Any]:
    kwargs: dict[str, Any] = {
        "params": dict(request.params) if request.params else None,
        "headers": dict(request.headers),
    }
    if isinstance(request.body, JSONBody):
        kwargs["json"] = request.body.data
    # Leave the client default in place unless the call overrides it
    if request.timeout is not None:
        kwargs["timeout"] = httpx.Timeout(request.timeout)
    return kwargs


class BaseTransport(abc.ABC):
    """Abstract base class for HTTP transports."""

    def __init__(self, config: HTTPConfig | None = None) -> None:
        self._config = config or HTTPConfig()

    @property
    def config(self) -> HTTPConfig:
        return self._config

    @abc.abstractmethod
    async def send(self, request: APIRequest) -> httpx.Response:
        """Send an HTTP request and return the response."""
        ...

    @abc.abstractmethod
    async def close(self) -> None:
        """Close any underlying resources."""
        ...


class BlockingTransport(BaseTransport):
    """
    Synchronous HTTP transport using a pooled httpx.Client.

    Methods are declared async but don't actually await anything,
    allowing them to be executed via iter_coroutine().
    """

    def __init__(
        self,
        config: HTTPConfig | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(config)
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = create_base_client(self._config)
        return self._client

    async def send(self, request: APIRequest) -> httpx.Response:
        """Send a synchronous HTTP request (wrapped as async for iter_coroutine)."""
        return self._get_client().request(
            request.method, request.url, **_request_kwargs(request)
        )

    async def close(self) -> None:
        """Close the pooled client unless it was supplied by the caller."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None


class AsyncTransport(BaseTransport):
    """Asynchronous HTTP transport sharing one pooled httpx.AsyncClient.

    A single instance may back many API clients. A caller-supplied
    ``client`` is used as-is and never closed by the transport.
    """

    def __init__(
        self,
        config: HTTPConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(config)
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = create_base_async_client(self._config)
        return self._client

    async def send(self, request: APIRequest) -> httpx.Response:
        """Send an asynchronous HTTP request over the shared pool."""
        return await self._get_client().request(
            request.method, request.url, **_request_kwargs(request)
        )

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


class EphemeralAsyncTransport(BaseTransport):
    """Asynchronous transport that opens a fresh httpx.AsyncClient per request.

    Simpler than :class:`AsyncTransport` but pays connection setup on every
    call. The per-call client is closed on every exit path.
    """

    async def send(self, request: APIRequest) -> httpx.Response:
        # Use a fresh client for each request (ephemeral pattern)
        async with create_base_async_client(self._config) as client:
            resp = await client.request(
                request.method, request.url, **_request_kwargs(request)
            )
            await resp.aread()
        return resp

    async def close(self) -> None:
        """No-op: nothing outlives a single request."""
        pass


__all__ = [
    "APIRequest",
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "EphemeralAsyncTransport",
    "JSONBody",
    "RequestBody",
]
