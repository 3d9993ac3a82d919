"""Operation dispatcher bound to one server URL and middleware chain."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

import httpx

from .._http import APIRequest, BaseTransport, RequestBody
from .middleware import Middleware, Pipeline, compose

if TYPE_CHECKING:
    from .operations import Operation


class Dispatcher:
    """Sends operations to ``server_url`` through ``middlewares``.

    A dispatcher never changes after construction; switching environments
    means building a new one.
    """

    def __init__(
        self,
        server_url: str,
        transport: BaseTransport,
        middlewares: Sequence[Middleware],
        *,
        timeout: float | None = None,
    ) -> None:
        self._server_url = server_url.rstrip("/")
        self._transport = transport
        self._middlewares = tuple(middlewares)
        self._timeout = timeout
        self._pipeline: Pipeline = compose(self._middlewares, transport.send)

    @property
    def server_url(self) -> str:
        return self._server_url

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        return self._middlewares

    def build_url(self, path: str) -> str:
        return f"{self._server_url}/{path.lstrip('/')}"

    async def call(
        self,
        operation: Operation,
        *,
        path_params: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Run ``operation`` through the chain and check its status."""
        path = operation.format_path(**(path_params or {}))
        request = APIRequest(
            method=operation.method,
            url=self.build_url(path),
            params=params,
            body=body,
            timeout=timeout if timeout is not None else self._timeout,
        )
        response = await self._pipeline(request, operation.operation_id)
        return operation.check(response)


__all__ = ["Dispatcher"]
