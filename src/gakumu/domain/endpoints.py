"""Endpoints the local stack publishes to the host.

`resolve_endpoints` combines the bootstrap settings with the values of the
stack's env file:

- API port: explicit setting, else ``PORT``, else 3000.
- Database port: explicit setting, else ``DB_PORT``, else 5432.
- Database credentials: ``DB_USERNAME``/``DB_PASSWORD``/``DB_DATABASE`` with
  the usual aliases, falling back to ``postgres``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from gakumu.config import DEFAULT_API_PORT, DEFAULT_DB_PORT

from .errors import InvalidDatabaseUrlError, InvalidPortError

if TYPE_CHECKING:
    from gakumu.config import BootstrapSettings

MAX_PORT = 65535
DEFAULT_DB_CREDENTIAL = "postgres"  # pragma: no mutate

DB_USER_KEYS = ("DB_USERNAME", "DB_USER", "POSTGRES_USER")
DB_PASSWORD_KEYS = ("DB_PASSWORD", "POSTGRES_PASSWORD")
DB_NAME_KEYS = ("DB_DATABASE", "DB_NAME", "POSTGRES_DB")


@dataclass(frozen=True)
class StackEndpoints:
    """Addresses of the running stack as seen from the host."""

    api_url: str
    health_url: str
    db_host: str
    db_port: int
    db_url: str

    @property
    def db_address(self) -> str:
        """Database ``host:port`` string."""
        return f"{self.db_host}:{self.db_port}"


def _first(values: Mapping[str, str], keys: tuple[str, ...], default: str) -> str:
    for key in keys:
        if values.get(key):
            return values[key]
    return default


def _checked_url(url: str) -> str:
    try:
        make_url(url)
    except ArgumentError as e:
        raise InvalidDatabaseUrlError(url) from e
    return url


def _port(
    explicit: int | None, values: Mapping[str, str], key: str, default: int
) -> int:
    if explicit is not None:
        return explicit
    raw = values.get(key, "").strip()
    if not raw:
        return default
    try:
        port = int(raw)
    except ValueError as e:
        raise InvalidPortError(key, raw) from e
    if not 0 < port <= MAX_PORT:
        raise InvalidPortError(key, raw)
    return port


def resolve_endpoints(
    settings: BootstrapSettings,
    env_values: Mapping[str, str],
    db_url_override: str | None = None,
) -> StackEndpoints:
    """Resolve the stack endpoints from settings and env-file values.

    Args:
        settings: Bootstrap settings (host, explicit ports, health path).
        env_values: Parsed env-file values.
        db_url_override: Full database URL to use instead of building one.

    Returns:
        The resolved endpoints.

    Raises:
        InvalidPortError: If ``PORT`` or ``DB_PORT`` is not a valid port.
        InvalidDatabaseUrlError: If *db_url_override* cannot be parsed.
    """
    api_port = _port(settings.api_port, env_values, "PORT", DEFAULT_API_PORT)
    db_port = _port(settings.db_port, env_values, "DB_PORT", DEFAULT_DB_PORT)

    api_url = f"http://{settings.host}:{api_port}"
    health_path = "/" + settings.health_path.lstrip("/")

    if db_url_override:
        db_url = _checked_url(db_url_override)
    else:
        db_url = URL.create(
            "postgresql+psycopg",
            username=_first(env_values, DB_USER_KEYS, DEFAULT_DB_CREDENTIAL),
            password=_first(env_values, DB_PASSWORD_KEYS, DEFAULT_DB_CREDENTIAL),
            host=settings.host,
            port=db_port,
            database=_first(env_values, DB_NAME_KEYS, DEFAULT_DB_CREDENTIAL),
        ).render_as_string(hide_password=False)

    return StackEndpoints(
        api_url=api_url,
        health_url=api_url + health_path,
        db_host=settings.host,
        db_port=db_port,
        db_url=db_url,
    )
