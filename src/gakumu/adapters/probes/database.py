"""Database connectivity probe."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError

from gakumu.adapters.db.engine import make_engine
from gakumu.interfaces.readiness import ReadinessProbe

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class DatabaseProbe(ReadinessProbe):
    """Ready once the database accepts a connection and answers ``SELECT 1``."""

    def __init__(self, url: str, name: str = "db", connect_timeout: int = 2) -> None:
        self.name = name
        self.target = make_url(url).render_as_string(hide_password=True)
        self._url = url
        self._connect_timeout = connect_timeout

    def check(self) -> bool:
        engine = make_engine(self._url, connect_timeout=self._connect_timeout)
        stmt = text("SELECT 1")  # pragma: no mutate
        try:
            with engine.connect() as conn:
                conn.execute(stmt)
        except OperationalError as e:
            logger.debug("%s: %s", self.name, e.orig or e)
            return False
        finally:
            engine.dispose()
        return True
