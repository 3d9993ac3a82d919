"""Client core: environments, shared state, middleware and dispatch."""

from __future__ import annotations

from .client import ApiClient, AsyncApiClient
from .dispatch import Dispatcher
from .environment import Environment, EnvironmentResolver, resolve
from .middleware import (
    BearerAuthMiddleware,
    LoggingMiddleware,
    Middleware,
    MiddlewareType,
    build_chain,
    compose,
    select_types,
)
from .operations import OPERATIONS, Operation
from .state import ClientState

__all__ = [
    "ApiClient",
    "AsyncApiClient",
    "BearerAuthMiddleware",
    "ClientState",
    "Dispatcher",
    "Environment",
    "EnvironmentResolver",
    "LoggingMiddleware",
    "Middleware",
    "MiddlewareType",
    "OPERATIONS",
    "Operation",
    "build_chain",
    "compose",
    "resolve",
    "select_types",
]
