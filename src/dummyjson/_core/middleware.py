"""Request middleware and chain composition.

Middleware sits between the typed client methods and the transport. Each
one receives the request, the operation id and a ``next`` callable that
runs the rest of the chain. Chains are plain ordered sequences; the first
element is the outermost wrapper.
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Protocol

import httpx

from .._http import APIRequest

if TYPE_CHECKING:
    from .environment import Environment
    from .state import ClientState

Next = Callable[[APIRequest], Awaitable[httpx.Response]]
Pipeline = Callable[[APIRequest, str], Awaitable[httpx.Response]]

DEFAULT_APP_NAME = "DummyJSON"
DEFAULT_LOG_PREFIX = "[api]"

request_logger = logging.getLogger("dummyjson.requests")


class Middleware(Protocol):
    async def intercept(
        self, request: APIRequest, operation_id: str, next: Next
    ) -> httpx.Response: ...


class MiddlewareType(enum.IntEnum):
    """Middleware kinds; lower values wrap higher ones."""

    LOGGING = 0
    AUTH = 1


class LoggingMiddleware:
    """Log request and response metadata without touching either body."""

    def __init__(
        self,
        app_name: str = DEFAULT_APP_NAME,
        prefix: str = DEFAULT_LOG_PREFIX,
        *,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self.app_name = app_name
        self.prefix = prefix
        self._logger = logger or request_logger
        self._level = level

    async def intercept(
        self, request: APIRequest, operation_id: str, next: Next
    ) -> httpx.Response:
        self._logger.log(
            self._level,
            "%s [%s] -> %s %s (%s)",
            self.prefix,
            self.app_name,
            request.method,
            request.url,
            operation_id,
        )
        started = time.perf_counter()
        try:
            response = await next(request)
        except Exception as exc:
            self._logger.log(
                self._level,
                "%s [%s] !! %s %s failed after %.1fms: %r",
                self.prefix,
                self.app_name,
                request.method,
                request.url,
                (time.perf_counter() - started) * 1000,
                exc,
            )
            raise
        self._logger.log(
            self._level,
            "%s [%s] <- %s %s %d (%.1fms)",
            self.prefix,
            self.app_name,
            request.method,
            request.url,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response


class BearerAuthMiddleware:
    """Attach ``Authorization: Bearer <token>`` to non-public operations.

    ``token_provider`` and ``skip_authorization`` are consulted on every
    request, so token changes apply to clients that already exist.
    """

    def __init__(
        self,
        token_provider: Callable[[], str | None],
        skip_authorization: Callable[[str], bool] | None = None,
    ) -> None:
        self._token_provider = token_provider
        self._skip_authorization = skip_authorization or (lambda _operation_id: False)

    @classmethod
    def from_state(cls, state: ClientState) -> BearerAuthMiddleware:
        return cls(state.get_token, state.is_public_operation)

    async def intercept(
        self, request: APIRequest, operation_id: str, next: Next
    ) -> httpx.Response:
        token = self._token_provider()
        if token and not self._skip_authorization(operation_id):
            request = request.with_headers({"Authorization": f"Bearer {token}"})
        return await next(request)


def select_types(
    environment: Environment, logging_allowed: bool
) -> tuple[MiddlewareType, ...]:
    """Return the middleware kinds for ``environment``, outermost first.

    Every environment authenticates; logging is optional.
    """
    types = {MiddlewareType.AUTH}
    if logging_allowed:
        types.add(MiddlewareType.LOGGING)
    return tuple(sorted(types))


def build_chain(
    types: Sequence[MiddlewareType],
    auth_middleware: Middleware,
    logging_middleware: Middleware,
) -> tuple[Middleware, ...]:
    """Map middleware kinds onto existing instances, preserving order."""
    instances: dict[MiddlewareType, Middleware] = {
        MiddlewareType.LOGGING: logging_middleware,
        MiddlewareType.AUTH: auth_middleware,
    }
    return tuple(instances[kind] for kind in types)


def compose(middlewares: Sequence[Middleware], terminal: Next) -> Pipeline:
    """Wrap ``terminal`` so that ``middlewares[0]`` runs first."""

    async def _terminal(req: APIRequest, operation_id: str) -> httpx.Response:
        return await terminal(req)

    pipeline: Pipeline = _terminal
    for middleware in reversed(middlewares):
        next_pipeline = pipeline

        async def _wrapped(
            req: APIRequest,
            operation_id: str,
            *,
            _mw: Middleware = middleware,
            _n: Pipeline = next_pipeline,
        ) -> httpx.Response:
            async def _next(r: APIRequest) -> httpx.Response:
                return await _n(r, operation_id)

            return await _mw.intercept(req, operation_id, _next)

        pipeline = _wrapped
    return pipeline


__all__ = [
    "Middleware",
    "MiddlewareType",
    "LoggingMiddleware",
    "BearerAuthMiddleware",
    "Next",
    "Pipeline",
    "select_types",
    "build_chain",
    "compose",
]
