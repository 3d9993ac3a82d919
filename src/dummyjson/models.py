from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class _Resource(BaseModel):
    """Base for API payloads: camelCase on the wire, unknown fields kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# Auth


class LoginRequest(_Resource):
    username: str
    password: str
    expires_in_mins: int | None = Field(default=None, alias="expiresInMins")


class AuthResponse(_Resource):
    id: int | None = None
    username: str | None = None
    email: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    gender: str | None = None
    image: str | None = None
    access_token: str | None = Field(default=None, alias="accessToken")
    refresh_token: str | None = Field(default=None, alias="refreshToken")


# Users


class Address(_Resource):
    address: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = Field(default=None, alias="postalCode")


class User(_Resource):
    id: int | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    maiden_name: str | None = Field(default=None, alias="maidenName")
    age: int | None = None
    gender: str | None = None
    email: str | None = None
    phone: str | None = None
    username: str | None = None
    birth_date: str | None = Field(default=None, alias="birthDate")
    image: str | None = None
    address: Address | None = None


# Posts


class Reactions(_Resource):
    likes: int | None = None
    dislikes: int | None = None


class Post(_Resource):
    id: int | None = None
    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None
    reactions: Reactions | None = None
    views: int | None = None
    user_id: int | None = Field(default=None, alias="userId")


# Products


class Product(_Resource):
    id: int | None = None
    title: str | None = None
    description: str | None = None
    category: str | None = None
    price: float | None = None
    discount_percentage: float | None = Field(default=None, alias="discountPercentage")
    rating: float | None = None
    stock: int | None = None
    brand: str | None = None
    thumbnail: str | None = None
    images: list[str] | None = None


# Todos


class Todo(_Resource):
    id: int | None = None
    todo: str | None = None
    completed: bool | None = None
    user_id: int | None = Field(default=None, alias="userId")


# Comments


class CommentUser(_Resource):
    id: int | None = None
    username: str | None = None
    full_name: str | None = Field(default=None, alias="fullName")


class Comment(_Resource):
    id: int | None = None
    body: str | None = None
    post_id: int | None = Field(default=None, alias="postId")
    likes: int | None = None
    user: CommentUser | None = None


# Carts


class CartProduct(_Resource):
    id: int | None = None
    title: str | None = None
    price: float | None = None
    quantity: int | None = None
    total: float | None = None
    discount_percentage: float | None = Field(default=None, alias="discountPercentage")
    discounted_total: float | None = Field(default=None, alias="discountedTotal")
    thumbnail: str | None = None


class Cart(_Resource):
    id: int | None = None
    products: list[CartProduct] | None = None
    total: float | None = None
    discounted_total: float | None = Field(default=None, alias="discountedTotal")
    user_id: int | None = Field(default=None, alias="userId")
    total_products: int | None = Field(default=None, alias="totalProducts")
    total_quantity: int | None = Field(default=None, alias="totalQuantity")


@dataclass(slots=True)
class ListResponse(Generic[T]):
    """One page of a list endpoint."""

    items: list[T]
    total: int
    skip: int | None = None
    limit: int | None = None


__all__ = [
    "LoginRequest",
    "AuthResponse",
    "Address",
    "User",
    "Reactions",
    "Post",
    "Product",
    "Todo",
    "CommentUser",
    "Comment",
    "CartProduct",
    "Cart",
    "ListResponse",
]
