"""HTTP health-check probe."""

from __future__ import annotations

import logging

import httpx

from gakumu.interfaces.readiness import ReadinessProbe

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class HttpHealthProbe(ReadinessProbe):
    """Ready once ``GET <url>`` answers with a 2xx status.

    Connection errors and timeouts count as "not ready"; redirects are not
    followed, so a 3xx from the health endpoint is not ready either.
    """

    def __init__(
        self,
        url: str,
        name: str = "api",
        timeout: float = 2.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.name = name
        self.target = url
        self._url = url
        self._timeout = timeout
        self._transport = transport

    def check(self) -> bool:
        try:
            with httpx.Client(
                timeout=httpx.Timeout(self._timeout), transport=self._transport
            ) as client:
                response = client.get(self._url)
        except httpx.HTTPError as e:
            logger.debug("%s: %s", self.name, e)
            return False
        logger.debug("%s: HTTP %s from %s", self.name, response.status_code, self._url)
        return response.is_success
