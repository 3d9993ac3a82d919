"""DummyJSON API clients with environment switching."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from .._http import (
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    HTTPConfig,
    JSONBody,
    iter_coroutine,
)
from ..env import Env, get_env
from ..models import (
    AuthResponse,
    Cart,
    Comment,
    ListResponse,
    LoginRequest,
    Post,
    Product,
    Todo,
    User,
)
from . import operations as ops
from .dispatch import Dispatcher
from .environment import Environment, EnvironmentResolver, coerce_environment
from .middleware import (
    DEFAULT_APP_NAME,
    DEFAULT_LOG_PREFIX,
    BearerAuthMiddleware,
    LoggingMiddleware,
    MiddlewareType,
    build_chain,
    select_types,
)
from .operations import Operation
from .state import ClientState

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class _Binding:
    """Everything a call needs, swapped as one unit."""

    environment: Environment
    server_url: str
    middleware_types: tuple[MiddlewareType, ...]
    dispatcher: Dispatcher


def _page_params(limit: int, skip: int | None = None) -> dict[str, int]:
    if limit < 0:
        raise ValueError("limit must be >= 0")
    params = {"limit": limit}
    if skip is not None:
        if skip < 0:
            raise ValueError("skip must be >= 0")
        params["skip"] = skip
    return params


class _BaseApiClient:
    """Shared async implementation for the sync and async clients."""

    _transport: BaseTransport
    _owns_transport: bool

    def _setup(
        self,
        environment: Environment | str,
        transport: BaseTransport,
        *,
        state: ClientState | None,
        resolver: EnvironmentResolver | None,
        app_name: str,
        log_prefix: str,
        timeout: float | None,
    ) -> None:
        self._state = state if state is not None else ClientState()
        self._resolver = resolver or EnvironmentResolver()
        self._timeout = timeout
        self._transport = transport
        # Built once; reused by every binding
        self._auth_middleware = BearerAuthMiddleware.from_state(self._state)
        self._logging_middleware = LoggingMiddleware(app_name, log_prefix)
        self._lock = threading.Lock()
        self._binding = self._bind(environment)

    def _bind(self, environment: Environment | str) -> _Binding:
        env = coerce_environment(environment)
        server_url = self._resolver.resolve(env)
        types = select_types(env, self._state.is_logging_enabled())
        chain = build_chain(types, self._auth_middleware, self._logging_middleware)
        dispatcher = Dispatcher(server_url, self._transport, chain, timeout=self._timeout)
        return _Binding(env, server_url, types, dispatcher)

    def _rebind(self, environment: Environment | str | None = None) -> None:
        # None rebinds whatever environment is current once the lock is held
        with self._lock:
            if environment is None:
                environment = self._binding.environment
            binding = self._bind(environment)
            self._binding = binding
        logger.debug(
            "Bound to %s (%s) with middleware %s",
            binding.environment.value,
            binding.server_url,
            [t.name for t in binding.middleware_types],
        )

    @property
    def environment(self) -> Environment:
        return self._binding.environment

    @property
    def server_url(self) -> str:
        return self._binding.server_url

    @property
    def middleware_types(self) -> tuple[MiddlewareType, ...]:
        return self._binding.middleware_types

    @property
    def state(self) -> ClientState:
        return self._state

    async def _call(self, operation: Operation, **kwargs: Any) -> httpx.Response:
        # Read the binding once so the whole call sees one configuration
        binding = self._binding
        return await binding.dispatcher.call(operation, **kwargs)

    async def _get_one(self, operation: Operation, model: type[_M], id: int) -> _M:
        resp = await self._call(operation, path_params={"id": id})
        return model.model_validate(resp.json())

    async def _get_page(
        self,
        operation: Operation,
        model: type[_M],
        key: str,
        *,
        limit: int,
        skip: int | None = None,
    ) -> ListResponse[_M]:
        resp = await self._call(operation, params=_page_params(limit, skip))
        payload = resp.json()
        return ListResponse(
            items=[model.model_validate(item) for item in payload.get(key) or []],
            total=payload.get("total") or 0,
            skip=payload.get("skip"),
            limit=payload.get("limit"),
        )

    async def _login(
        self, username: str, password: str, expires_in_mins: int | None = None
    ) -> AuthResponse:
        credentials = LoginRequest(
            username=username, password=password, expires_in_mins=expires_in_mins
        )
        resp = await self._call(ops.LOGIN_USER, body=JSONBody(credentials.to_payload()))
        return AuthResponse.model_validate(resp.json())

    async def _get_users(self, limit: int = 10, skip: int = 0) -> ListResponse[User]:
        return await self._get_page(ops.GET_ALL_USERS, User, "users", limit=limit, skip=skip)

    async def _get_user(self, id: int) -> User:
        return await self._get_one(ops.GET_USER_BY_ID, User, id)

    async def _create_user(self, user: User) -> User:
        resp = await self._call(ops.CREATE_USER, body=JSONBody(user.to_payload()))
        return User.model_validate(resp.json())

    async def _get_posts(self, limit: int = 10, skip: int = 0) -> ListResponse[Post]:
        return await self._get_page(ops.GET_ALL_POSTS, Post, "posts", limit=limit, skip=skip)

    async def _get_post(self, id: int) -> Post:
        return await self._get_one(ops.GET_POST_BY_ID, Post, id)

    async def _create_post(self, post: Post) -> None:
        await self._call(ops.CREATE_POST, body=JSONBody(post.to_payload()))

    async def _get_products(self, limit: int = 10, skip: int = 0) -> ListResponse[Product]:
        return await self._get_page(
            ops.GET_ALL_PRODUCTS, Product, "products", limit=limit, skip=skip
        )

    async def _get_product(self, id: int) -> Product:
        return await self._get_one(ops.GET_PRODUCT_BY_ID, Product, id)

    async def _create_product(self, product: Product) -> None:
        await self._call(ops.CREATE_PRODUCT, body=JSONBody(product.to_payload()))

    async def _get_todos(self, limit: int = 10) -> ListResponse[Todo]:
        return await self._get_page(ops.GET_ALL_TODOS, Todo, "todos", limit=limit)

    async def _get_todo(self, id: int) -> Todo:
        return await self._get_one(ops.GET_TODO_BY_ID, Todo, id)

    async def _create_todo(self, todo: Todo) -> None:
        await self._call(ops.CREATE_TODO, body=JSONBody(todo.to_payload()))

    async def _get_comments(self, limit: int = 10) -> ListResponse[Comment]:
        return await self._get_page(ops.GET_ALL_COMMENTS, Comment, "comments", limit=limit)

    async def _get_comment(self, id: int) -> Comment:
        return await self._get_one(ops.GET_COMMENT_BY_ID, Comment, id)

    async def _get_carts(self, limit: int = 10) -> ListResponse[Cart]:
        return await self._get_page(ops.GET_ALL_CARTS, Cart, "carts", limit=limit)

    async def _get_cart(self, id: int) -> Cart:
        return await self._get_one(ops.GET_CART_BY_ID, Cart, id)


class ApiClient(_BaseApiClient):
    """Synchronous DummyJSON client.

    Owns a pooled :class:`BlockingTransport` unless one is passed in. A
    caller-supplied transport must not suspend (async transports are only
    usable with :class:`AsyncApiClient`) and is not closed by this client.
    Passing both ``transport`` and ``config`` raises ``ValueError``.
    """

    def __init__(
        self,
        environment: Environment | str = Environment.PRODUCTION,
        transport: BaseTransport | None = None,
        *,
        state: ClientState | None = None,
        resolver: EnvironmentResolver | None = None,
        app_name: str = DEFAULT_APP_NAME,
        log_prefix: str = DEFAULT_LOG_PREFIX,
        timeout: float | None = None,
        config: HTTPConfig | None = None,
    ):
        if transport is not None and config is not None:
            raise ValueError(
                "config= only applies to the default transport; "
                "configure the transport you pass instead"
            )
        self._owns_transport = transport is None
        self._setup(
            environment,
            transport or BlockingTransport(config),
            state=state,
            resolver=resolver,
            app_name=app_name,
            log_prefix=log_prefix,
            timeout=timeout,
        )

    @classmethod
    def from_env(
        cls, env: Env | None = None, transport: BaseTransport | None = None
    ) -> ApiClient:
        """Create a client configured from ``DUMMYJSON_*`` variables."""
        ev = env or get_env()
        return cls(
            ev.DUMMYJSON_ENV or Environment.PRODUCTION,
            transport,
            state=ClientState.from_env(ev),
            resolver=EnvironmentResolver.from_env(ev),
            timeout=ev.timeout,
        )

    def switch_environment(self, to: Environment | str) -> None:
        """Point the client at another environment."""
        self._rebind(to)

    def reload_settings(self) -> None:
        """Recompose the middleware chain from the current shared state."""
        self._rebind()

    def login(
        self, username: str, password: str, expires_in_mins: int | None = None
    ) -> AuthResponse:
        """Log in with username and password."""
        return iter_coroutine(self._login(username, password, expires_in_mins))

    def get_users(self, limit: int = 10, skip: int = 0) -> ListResponse[User]:
        """Get a page of users."""
        return iter_coroutine(self._get_users(limit, skip))

    def get_user(self, id: int) -> User:
        """Get a user by id."""
        return iter_coroutine(self._get_user(id))

    def create_user(self, user: User) -> User:
        """Create a user and return it with its assigned id."""
        return iter_coroutine(self._create_user(user))

    def get_posts(self, limit: int = 10, skip: int = 0) -> ListResponse[Post]:
        """Get a page of posts."""
        return iter_coroutine(self._get_posts(limit, skip))

    def get_post(self, id: int) -> Post:
        """Get a post by id."""
        return iter_coroutine(self._get_post(id))

    def create_post(self, post: Post) -> None:
        """Create a post."""
        return iter_coroutine(self._create_post(post))

    def get_products(self, limit: int = 10, skip: int = 0) -> ListResponse[Product]:
        """Get a page of products."""
        return iter_coroutine(self._get_products(limit, skip))

    def get_product(self, id: int) -> Product:
        """Get a product by id."""
        return iter_coroutine(self._get_product(id))

    def create_product(self, product: Product) -> None:
        """Create a product."""
        return iter_coroutine(self._create_product(product))

    def get_todos(self, limit: int = 10) -> ListResponse[Todo]:
        """Get a page of todos."""
        return iter_coroutine(self._get_todos(limit))

    def get_todo(self, id: int) -> Todo:
        """Get a todo by id."""
        return iter_coroutine(self._get_todo(id))

    def create_todo(self, todo: Todo) -> None:
        """Create a todo."""
        return iter_coroutine(self._create_todo(todo))

    def get_comments(self, limit: int = 10) -> ListResponse[Comment]:
        """Get a page of comments."""
        return iter_coroutine(self._get_comments(limit))

    def get_comment(self, id: int) -> Comment:
        """Get a comment by id."""
        return iter_coroutine(self._get_comment(id))

    def get_carts(self, limit: int = 10) -> ListResponse[Cart]:
        """Get a page of carts."""
        return iter_coroutine(self._get_carts(limit))

    def get_cart(self, id: int) -> Cart:
        """Get a cart by id."""
        return iter_coroutine(self._get_cart(id))

    def close(self) -> None:
        if self._owns_transport:
            iter_coroutine(self._transport.close())

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncApiClient(_BaseApiClient):
    """Asynchronous DummyJSON client.

    Calls may run concurrently. :meth:`switch_environment` swaps the server
    URL, middleware chain and dispatcher together; calls already in flight
    finish against the configuration they started with.

    ``config`` builds the default pooled transport and cannot be combined
    with an explicit ``transport``.
    """

    def __init__(
        self,
        environment: Environment | str = Environment.PRODUCTION,
        transport: BaseTransport | None = None,
        *,
        state: ClientState | None = None,
        resolver: EnvironmentResolver | None = None,
        app_name: str = DEFAULT_APP_NAME,
        log_prefix: str = DEFAULT_LOG_PREFIX,
        timeout: float | None = None,
        config: HTTPConfig | None = None,
    ):
        if transport is not None and config is not None:
            raise ValueError(
                "config= only applies to the default transport; "
                "configure the transport you pass instead"
            )
        self._owns_transport = transport is None
        self._setup(
            environment,
            transport or AsyncTransport(config),
            state=state,
            resolver=resolver,
            app_name=app_name,
            log_prefix=log_prefix,
            timeout=timeout,
        )

    @classmethod
    async def create(
        cls,
        environment: Environment | str = Environment.PRODUCTION,
        transport: BaseTransport | None = None,
        *,
        state: ClientState | None = None,
        resolver: EnvironmentResolver | None = None,
        app_name: str = DEFAULT_APP_NAME,
        log_prefix: str = DEFAULT_LOG_PREFIX,
        timeout: float | None = None,
        config: HTTPConfig | None = None,
    ) -> AsyncApiClient:
        """Create a ready client.

        Raises:
            ConfigurationError: If ``environment`` cannot be resolved.
        """
        return cls(
            environment,
            transport,
            state=state,
            resolver=resolver,
            app_name=app_name,
            log_prefix=log_prefix,
            timeout=timeout,
            config=config,
        )

    @classmethod
    def from_env(
        cls, env: Env | None = None, transport: BaseTransport | None = None
    ) -> AsyncApiClient:
        """Create a client configured from ``DUMMYJSON_*`` variables."""
        ev = env or get_env()
        return cls(
            ev.DUMMYJSON_ENV or Environment.PRODUCTION,
            transport,
            state=ClientState.from_env(ev),
            resolver=EnvironmentResolver.from_env(ev),
            timeout=ev.timeout,
        )

    async def switch_environment(self, to: Environment | str) -> None:
        """Point the client at another environment."""
        self._rebind(to)

    async def reload_settings(self) -> None:
        """Recompose the middleware chain from the current shared state."""
        self._rebind()

    async def login(
        self, username: str, password: str, expires_in_mins: int | None = None
    ) -> AuthResponse:
        return await self._login(username, password, expires_in_mins)

    async def get_users(self, limit: int = 10, skip: int = 0) -> ListResponse[User]:
        return await self._get_users(limit, skip)

    async def get_user(self, id: int) -> User:
        return await self._get_user(id)

    async def create_user(self, user: User) -> User:
        return await self._create_user(user)

    async def get_posts(self, limit: int = 10, skip: int = 0) -> ListResponse[Post]:
        return await self._get_posts(limit, skip)

    async def get_post(self, id: int) -> Post:
        return await self._get_post(id)

    async def create_post(self, post: Post) -> None:
        await self._create_post(post)

    async def get_products(self, limit: int = 10, skip: int = 0) -> ListResponse[Product]:
        return await self._get_products(limit, skip)

    async def get_product(self, id: int) -> Product:
        return await self._get_product(id)

    async def create_product(self, product: Product) -> None:
        await self._create_product(product)

    async def get_todos(self, limit: int = 10) -> ListResponse[Todo]:
        return await self._get_todos(limit)

    async def get_todo(self, id: int) -> Todo:
        return await self._get_todo(id)

    async def create_todo(self, todo: Todo) -> None:
        await self._create_todo(todo)

    async def get_comments(self, limit: int = 10) -> ListResponse[Comment]:
        return await self._get_comments(limit)

    async def get_comment(self, id: int) -> Comment:
        return await self._get_comment(id)

    async def get_carts(self, limit: int = 10) -> ListResponse[Cart]:
        return await self._get_carts(limit)

    async def get_cart(self, id: int) -> Cart:
        return await self._get_cart(id)

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> AsyncApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


__all__ = ["ApiClient", "AsyncApiClient"]
