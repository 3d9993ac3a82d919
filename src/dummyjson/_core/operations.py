"""Operation table for the DummyJSON REST API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from ..errors import NotFoundError, UnexpectedResponseError


@dataclass(frozen=True, slots=True)
class Operation:
    """One REST action and the statuses it knows how to interpret."""

    operation_id: str
    method: str
    path: str
    ok: frozenset[int] = frozenset({200})
    not_found: frozenset[int] = frozenset()

    def format_path(self, **path_params: Any) -> str:
        return self.path.format(**path_params)

    def check(self, response: httpx.Response) -> httpx.Response:
        """Return ``response`` if it is a success, otherwise raise.

        Raises:
            NotFoundError: For the operation's "resource absent" statuses.
            UnexpectedResponseError: For any status not listed above.
        """
        status = response.status_code
        if status in self.ok:
            return response
        if status in self.not_found:
            raise NotFoundError(self.operation_id, status)
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text
        raise UnexpectedResponseError(self.operation_id, status, body)


_CREATED = frozenset({200, 201})
_MISSING = frozenset({404})

LOGIN_USER = Operation("loginUser", "POST", "/auth/login")

GET_ALL_USERS = Operation("getAllUsers", "GET", "/users")
GET_USER_BY_ID = Operation("getUserById", "GET", "/users/{id}", not_found=_MISSING)
CREATE_USER = Operation("createUser", "POST", "/users/add", ok=_CREATED)

GET_ALL_POSTS = Operation("getAllPosts", "GET", "/posts")
GET_POST_BY_ID = Operation("getPostById", "GET", "/posts/{id}", not_found=_MISSING)
CREATE_POST = Operation("createPost", "POST", "/posts/add", ok=_CREATED)

GET_ALL_PRODUCTS = Operation("getAllProducts", "GET", "/products")
GET_PRODUCT_BY_ID = Operation(
    "getProductById", "GET", "/products/{id}", not_found=_MISSING
)
CREATE_PRODUCT = Operation("createProduct", "POST", "/products/add", ok=_CREATED)

GET_ALL_TODOS = Operation("getAllTodos", "GET", "/todos")
GET_TODO_BY_ID = Operation("getTodoById", "GET", "/todos/{id}", not_found=_MISSING)
CREATE_TODO = Operation("createTodo", "POST", "/todos/add", ok=_CREATED)

GET_ALL_COMMENTS = Operation("getAllComments", "GET", "/comments")
GET_COMMENT_BY_ID = Operation(
    "getCommentById", "GET", "/comments/{id}", not_found=_MISSING
)

GET_ALL_CARTS = Operation("getAllCarts", "GET", "/carts")
GET_CART_BY_ID = Operation("getCartById", "GET", "/carts/{id}", not_found=_MISSING)

OPERATIONS: dict[str, Operation] = {
    op.operation_id: op
    for op in (
        LOGIN_USER,
        GET_ALL_USERS,
        GET_USER_BY_ID,
        CREATE_USER,
        GET_ALL_POSTS,
        GET_POST_BY_ID,
        CREATE_POST,
        GET_ALL_PRODUCTS,
        GET_PRODUCT_BY_ID,
        CREATE_PRODUCT,
        GET_ALL_TODOS,
        GET_TODO_BY_ID,
        CREATE_TODO,
        GET_ALL_COMMENTS,
        GET_COMMENT_BY_ID,
        GET_ALL_CARTS,
        GET_CART_BY_ID,
    )
}


__all__ = ["Operation", "OPERATIONS"]
