"""Server environments and their base URLs."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType

import httpx

from ..env import Env, get_env
from ..errors import ConfigurationError

PRODUCTION_BASE_URL = "https://dummyjson.com"
LOCAL_PORT = 8080
LOCAL_BASE_URL_TEMPLATE = "http://localhost:{port}"


class Environment(str, enum.Enum):
    """Named deployment target."""

    PRODUCTION = "production"
    LOCAL = "local"


DEFAULT_SERVERS: Mapping[Environment, str] = MappingProxyType(
    {
        Environment.PRODUCTION: PRODUCTION_BASE_URL,
        Environment.LOCAL: LOCAL_BASE_URL_TEMPLATE,
    }
)
DEFAULT_VARIABLES: Mapping[str, str] = MappingProxyType({"port": str(LOCAL_PORT)})


def coerce_environment(value: Environment | str) -> Environment:
    if isinstance(value, Environment):
        return value
    try:
        return Environment(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(e.value for e in Environment)
        raise ConfigurationError(
            f"Unknown environment {value!r}; expected one of: {choices}"
        ) from exc


class EnvironmentResolver:
    """Maps environments to validated base URLs.

    Templates may reference ``{name}`` placeholders that are filled from
    ``variables``. The resolver never mutates after construction, so
    :meth:`resolve` is safe to call from any thread or task.
    """

    def __init__(
        self,
        servers: Mapping[Environment | str, str] | None = None,
        variables: Mapping[str, str] | None = None,
    ) -> None:
        registry = dict(DEFAULT_SERVERS)
        for key, template in (servers or {}).items():
            registry[coerce_environment(key)] = template
        self._servers: Mapping[Environment, str] = MappingProxyType(registry)
        self._variables: Mapping[str, str] = MappingProxyType(
            {**DEFAULT_VARIABLES, **(variables or {})}
        )

    @classmethod
    def from_env(cls, env: Env | None = None) -> EnvironmentResolver:
        """Build a resolver honouring ``DUMMYJSON_*_URL`` overrides."""
        ev = env or get_env()
        servers: dict[Environment | str, str] = {}
        if ev.DUMMYJSON_PRODUCTION_URL:
            servers[Environment.PRODUCTION] = ev.DUMMYJSON_PRODUCTION_URL
        if ev.DUMMYJSON_LOCAL_URL:
            servers[Environment.LOCAL] = ev.DUMMYJSON_LOCAL_URL
        return cls(servers)

    @property
    def servers(self) -> Mapping[Environment, str]:
        return self._servers

    def resolve(self, environment: Environment | str) -> str:
        """Return the base URL for ``environment`` without a trailing slash.

        Raises:
            ConfigurationError: If the environment is unknown or unregistered,
                or its template does not produce an absolute http(s) URL.
        """
        env = coerce_environment(environment)
        template = self._servers.get(env)
        if template is None:
            raise ConfigurationError(f"No server URL registered for {env.value!r}")

        try:
            expanded = template.format_map(self._variables)
        except (KeyError, IndexError, ValueError) as exc:
            raise ConfigurationError(
                f"Malformed server URL template for {env.value!r}: {template!r}"
            ) from exc

        try:
            url = httpx.URL(expanded)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(
                f"Invalid server URL for {env.value!r}: {expanded!r}"
            ) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(
                f"Server URL for {env.value!r} must be an absolute http(s) URL: {expanded!r}"
            )
        return str(url).rstrip("/")


def resolve(environment: Environment | str) -> str:
    """Resolve ``environment`` against the built-in server table."""
    return EnvironmentResolver().resolve(environment)


__all__ = [
    "Environment",
    "EnvironmentResolver",
    "DEFAULT_SERVERS",
    "LOCAL_PORT",
    "PRODUCTION_BASE_URL",
    "coerce_environment",
    "resolve",
]
