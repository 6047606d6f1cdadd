"""Database engine factory for readiness checks.

This module centralizes creation of the short-lived SQLAlchemy Engines used
to probe the stack's database:

- **PostgreSQL**: a ``connect_timeout`` is passed to the driver so a probe
  against a database that is still starting fails fast instead of hanging.
- **SQLite**: no tuning; supported so probes can be exercised without a server.

Engines use ``NullPool``; a probe opens one connection and disposes the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import NullPool

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

POSTGRES_NAMES = {"postgresql"}


def is_postgres(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to PostgreSQL."""
    u = make_url(str(url)) if not isinstance(url, URL) else url
    return u.get_backend_name() in POSTGRES_NAMES


def make_engine(
    url: str | URL, *, connect_timeout: int | None = None, echo: bool = False
) -> Engine:
    """Create a SQLAlchemy Engine suitable for a one-shot connectivity check.

    Args:
        url: Database connection URL (str or :class:`URL`).
        connect_timeout: Seconds the PostgreSQL driver waits for a connection.
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """
    connect_args: dict[str, Any] = {}
    if connect_timeout is not None and is_postgres(url):
        connect_args["connect_timeout"] = connect_timeout

    return create_engine(
        url, echo=echo, poolclass=NullPool, connect_args=connect_args
    )
