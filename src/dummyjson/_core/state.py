"""Thread-safe settings shared by one or more API clients."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..env import Env, get_env

DEFAULT_PUBLIC_OPERATION_IDS: tuple[str, ...] = ("loginUser",)


class ClientState:
    """Bearer token, logging flag and public operation ids.

    Each accessor is a single atomic read or write. Setters return ``True``
    when the stored value actually changed.

    Auth middleware built from a state reads the token and public ids on
    every request; the logging flag is read when a client composes its
    middleware chain.
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        logging_enabled: bool = True,
        public_operation_ids: Iterable[str] = DEFAULT_PUBLIC_OPERATION_IDS,
    ) -> None:
        self._lock = threading.Lock()
        self._token = token
        self._logging_enabled = logging_enabled
        self._public_ids = tuple(dict.fromkeys(public_operation_ids))
        self._public_lookup = frozenset(self._public_ids)

    @classmethod
    def from_env(cls, env: Env | None = None) -> ClientState:
        ev = env or get_env()
        logging_enabled = ev.logging_enabled
        public_ids = ev.public_operations
        return cls(
            token=ev.DUMMYJSON_TOKEN,
            logging_enabled=True if logging_enabled is None else logging_enabled,
            public_operation_ids=(
                DEFAULT_PUBLIC_OPERATION_IDS if public_ids is None else public_ids
            ),
        )

    def set_token(self, token: str | None) -> bool:
        with self._lock:
            changed = token != self._token
            self._token = token
            return changed

    def get_token(self) -> str | None:
        with self._lock:
            return self._token

    def set_logging_enabled(self, enabled: bool) -> bool:
        with self._lock:
            changed = enabled != self._logging_enabled
            self._logging_enabled = enabled
            return changed

    def is_logging_enabled(self) -> bool:
        with self._lock:
            return self._logging_enabled

    def set_public_operation_ids(self, operation_ids: Iterable[str]) -> bool:
        # Deduplicate, keeping first occurrence
        ids = tuple(dict.fromkeys(operation_ids))
        lookup = frozenset(ids)
        with self._lock:
            changed = ids != self._public_ids
            self._public_ids = ids
            self._public_lookup = lookup
            return changed

    def get_public_operation_ids(self) -> tuple[str, ...]:
        with self._lock:
            return self._public_ids

    def is_public_operation(self, operation_id: str) -> bool:
        with self._lock:
            return operation_id in self._public_lookup

    def __repr__(self) -> str:
        with self._lock:
            has_token = self._token is not None
            return (
                f"ClientState(token={'set' if has_token else None}, "
                f"logging_enabled={self._logging_enabled}, "
                f"public_operation_ids={self._public_ids!r})"
            )


__all__ = ["ClientState", "DEFAULT_PUBLIC_OPERATION_IDS"]
