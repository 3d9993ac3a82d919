"""Exceptions raised by the DummyJSON client.

Transport failures (``httpx.HTTPError`` and its subclasses) and decoding
failures are not wrapped; they reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any


class DummyJSONError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(DummyJSONError):
    """An environment could not be resolved to a usable base URL."""


class UnexpectedResponseError(DummyJSONError):
    """The server answered with a status the operation does not expect."""

    def __init__(self, operation_id: str, status_code: int, body: Any = None) -> None:
        self.operation_id = operation_id
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Unexpected response for {operation_id}: HTTP {status_code}"
        )


class NotFoundError(DummyJSONError):
    """The requested resource does not exist."""

    def __init__(self, operation_id: str, status_code: int = 404) -> None:
        self.operation_id = operation_id
        self.status_code = status_code
        super().__init__(f"Resource not found for {operation_id}")


__all__ = [
    "DummyJSONError",
    "ConfigurationError",
    "UnexpectedResponseError",
    "NotFoundError",
]
