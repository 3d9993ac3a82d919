"""Fixtures for integration tests using respx mocking.

The handlers below behave like the local mock server: fixed-shape data,
``emilys``/``emilyspass`` as the only valid login, pages of at most five
users starting at ``skip + 1``, and 404 for user ids above 100.
"""

import json

import httpx
import pytest
import respx

# API base URLs
PRODUCTION_API_BASE = "https://dummyjson.com"
LOCAL_API_BASE = "http://localhost:8080"

VALID_USERNAME = "emilys"
VALID_PASSWORD = "emilyspass"
MAX_PAGE = 5


# =============================================================================
# Mock handlers
# =============================================================================


def _page(request: httpx.Request, default_limit: int = 30) -> tuple[int, int]:
    limit = int(request.url.params.get("limit", default_limit))
    skip = int(request.url.params.get("skip", 0))
    return limit, skip


def _ids(limit: int, skip: int) -> list[int]:
    return list(range(skip + 1, skip + 1 + min(limit, MAX_PAGE)))


def login_handler(request: httpx.Request) -> httpx.Response:
    credentials = json.loads(request.content)
    if credentials.get("username") != VALID_USERNAME or credentials.get("password") != VALID_PASSWORD:
        return httpx.Response(400, json={"message": "Invalid credentials"})
    return httpx.Response(
        200,
        json={
            "id": 1,
            "username": VALID_USERNAME,
            "email": "emily.johnson@x.dummyjson.com",
            "firstName": "Emily",
            "lastName": "Johnson",
            "gender": "female",
            "image": "https://dummyjson.com/icon/emilys/128",
            "accessToken": "mock-access-token",
            "refreshToken": "mock-refresh-token",
        },
    )


def make_user(user_id: int) -> dict:
    return {
        "id": user_id,
        "firstName": f"User{user_id}",
        "lastName": "Test",
        "email": f"user{user_id}@example.com",
        "username": f"user{user_id}",
        "address": {"address": f"{user_id} Main St", "city": "Springfield", "postalCode": "62701"},
    }


def users_handler(request: httpx.Request) -> httpx.Response:
    limit, skip = _page(request)
    users = [make_user(i) for i in _ids(limit, skip)]
    return httpx.Response(200, json={"users": users, "total": 150, "skip": skip, "limit": limit})


def user_handler(request: httpx.Request, id: str) -> httpx.Response:
    user_id = int(id)
    if user_id > 100:
        return httpx.Response(404, json={"message": f"User with id '{user_id}' not found"})
    return httpx.Response(200, json=make_user(user_id))


def create_user_handler(request: httpx.Request) -> httpx.Response:
    user = json.loads(request.content)
    return httpx.Response(201, json={**user, "id": 101})


def posts_handler(request: httpx.Request) -> httpx.Response:
    limit, skip = _page(request)
    posts = [{"id": i, "title": f"Post {i} Title", "userId": i % 10 + 1} for i in _ids(limit, skip)]
    return httpx.Response(200, json={"posts": posts, "total": 251, "skip": skip, "limit": limit})


def post_handler(request: httpx.Request, id: str) -> httpx.Response:
    post_id = int(id)
    return httpx.Response(
        200,
        json={
            "id": post_id,
            "title": f"Post {post_id} Title",
            "body": "Body",
            "tags": ["technology"],
            "reactions": {"likes": post_id * 15, "dislikes": post_id * 2},
            "userId": post_id % 10 + 1,
        },
    )


def products_handler(request: httpx.Request) -> httpx.Response:
    limit, skip = _page(request)
    products = [{"id": i, "title": f"Product {i}", "price": i * 100 + 99} for i in _ids(limit, skip)]
    return httpx.Response(200, json={"products": products, "total": 194})


def product_handler(request: httpx.Request, id: str) -> httpx.Response:
    product_id = int(id)
    return httpx.Response(
        200,
        json={"id": product_id, "title": f"Product {product_id}", "price": 199.0, "discountPercentage": 12.5},
    )


def todos_handler(request: httpx.Request) -> httpx.Response:
    limit, _ = _page(request)
    todos = [{"id": i, "todo": f"Todo task {i}", "completed": i % 3 == 0, "userId": 1} for i in _ids(limit, 0)]
    return httpx.Response(200, json={"todos": todos, "total": 254})


def todo_handler(request: httpx.Request, id: str) -> httpx.Response:
    todo_id = int(id)
    return httpx.Response(200, json={"id": todo_id, "todo": f"Todo task {todo_id}", "completed": False})


def comments_handler(request: httpx.Request) -> httpx.Response:
    limit, _ = _page(request)
    comments = [
        {"id": i, "body": f"Comment {i}", "postId": i % 20 + 1, "user": {"id": 1, "fullName": "User One"}}
        for i in _ids(limit, 0)
    ]
    return httpx.Response(200, json={"comments": comments, "total": 340})


def comment_handler(request: httpx.Request, id: str) -> httpx.Response:
    comment_id = int(id)
    return httpx.Response(
        200,
        json={"id": comment_id, "body": "Nice", "postId": comment_id % 20 + 1, "likes": 3},
    )


def carts_handler(request: httpx.Request) -> httpx.Response:
    limit, _ = _page(request)
    carts = [{"id": i, "total": 100.0, "userId": i % 10 + 1, "products": []} for i in _ids(limit, 0)]
    return httpx.Response(200, json={"carts": carts, "total": 50})


def cart_handler(request: httpx.Request, id: str) -> httpx.Response:
    cart_id = int(id)
    return httpx.Response(
        200,
        json={
            "id": cart_id,
            "products": [
                {"id": 11, "title": "Product 11", "price": 200.0, "quantity": 1, "total": 200.0,
                 "discountPercentage": 12.5, "discountedTotal": 175.0},
            ],
            "total": 200.0,
            "discountedTotal": 175.0,
            "userId": cart_id % 10 + 1,
            "totalProducts": 1,
            "totalQuantity": 1,
        },
    )


def install_mock_api(router: respx.MockRouter) -> respx.MockRouter:
    """Register every endpoint on ``router`` (created with a base_url)."""
    router.post("/auth/login").mock(side_effect=login_handler)

    router.get("/users").mock(side_effect=users_handler)
    router.post("/users/add").mock(side_effect=create_user_handler)
    router.get(path__regex=r"^/users/(?P<id>\d+)$").mock(side_effect=user_handler)

    router.get("/posts").mock(side_effect=posts_handler)
    router.post("/posts/add").mock(return_value=httpx.Response(201))
    router.get(path__regex=r"^/posts/(?P<id>\d+)$").mock(side_effect=post_handler)

    router.get("/products").mock(side_effect=products_handler)
    router.post("/products/add").mock(return_value=httpx.Response(201))
    router.get(path__regex=r"^/products/(?P<id>\d+)$").mock(side_effect=product_handler)

    router.get("/todos").mock(side_effect=todos_handler)
    router.post("/todos/add").mock(return_value=httpx.Response(201))
    router.get(path__regex=r"^/todos/(?P<id>\d+)$").mock(side_effect=todo_handler)

    router.get("/comments").mock(side_effect=comments_handler)
    router.get(path__regex=r"^/comments/(?P<id>\d+)$").mock(side_effect=comment_handler)

    router.get("/carts").mock(side_effect=carts_handler)
    router.get(path__regex=r"^/carts/(?P<id>\d+)$").mock(side_effect=cart_handler)
    return router


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def local_api():
    """Mocked local mock server on the loopback port."""
    with respx.mock(assert_all_called=False, base_url=LOCAL_API_BASE) as mock:
        yield install_mock_api(mock)


@pytest.fixture
def production_api():
    """Mocked production API."""
    with respx.mock(assert_all_called=False, base_url=PRODUCTION_API_BASE) as mock:
        yield install_mock_api(mock)
