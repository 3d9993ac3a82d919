from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Mapping

from .errors import ConfigurationError

__all__ = ["Env", "get_env", "parse_bool", "parse_list", "parse_timeout"]

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Env:
    DUMMYJSON_ENV: str | None = None
    DUMMYJSON_TOKEN: str | None = None
    DUMMYJSON_LOGGING: str | None = None
    DUMMYJSON_PUBLIC_OPERATIONS: str | None = None
    DUMMYJSON_PRODUCTION_URL: str | None = None
    DUMMYJSON_LOCAL_URL: str | None = None
    DUMMYJSON_TIMEOUT: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)

    def __getitem__(self, key: str) -> str | None:
        try:
            return getattr(self, key)
        except AttributeError as exc:
            raise KeyError(key) from exc

    def get(self, key: str, default: str | None = None) -> str | None:
        return getattr(self, key, default)

    @property
    def logging_enabled(self) -> bool | None:
        return parse_bool(self.DUMMYJSON_LOGGING)

    @property
    def public_operations(self) -> tuple[str, ...] | None:
        return parse_list(self.DUMMYJSON_PUBLIC_OPERATIONS)

    @property
    def timeout(self) -> float | None:
        return parse_timeout(self.DUMMYJSON_TIMEOUT)


def parse_bool(value: str | None) -> bool | None:
    """Interpret a flag; ``None`` when unset, ``False`` for 0/false/no/off."""
    if value is None:
        return None
    return value.strip().lower() not in _FALSE_VALUES


def parse_timeout(value: str | None) -> float | None:
    """Seconds as a non-negative float; ``None`` when unset."""
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        raise ConfigurationError(f"DUMMYJSON_TIMEOUT must be a number, got {value!r}") from None
    if not seconds >= 0:
        raise ConfigurationError(f"DUMMYJSON_TIMEOUT must be >= 0, got {value!r}")
    return seconds


def parse_list(value: str | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _get(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value == "":
        return None
    return value


def get_env(env: Mapping[str, str] | None = None) -> Env:
    """Return the client configuration variables.

    Empty strings are normalized to ``None``. Returns an immutable ``Env``
    dataclass that supports both attribute access (e.g. ``ev.DUMMYJSON_TOKEN``)
    and mapping-like access (e.g. ``ev["DUMMYJSON_TOKEN"]``).
    """
    if env is None:
        env = os.environ

    return Env(
        DUMMYJSON_ENV=_get(env, "DUMMYJSON_ENV"),
        DUMMYJSON_TOKEN=_get(env, "DUMMYJSON_TOKEN"),
        DUMMYJSON_LOGGING=_get(env, "DUMMYJSON_LOGGING"),
        DUMMYJSON_PUBLIC_OPERATIONS=_get(env, "DUMMYJSON_PUBLIC_OPERATIONS"),
        DUMMYJSON_PRODUCTION_URL=_get(env, "DUMMYJSON_PRODUCTION_URL"),
        DUMMYJSON_LOCAL_URL=_get(env, "DUMMYJSON_LOCAL_URL"),
        DUMMYJSON_TIMEOUT=_get(env, "DUMMYJSON_TIMEOUT"),
    )
