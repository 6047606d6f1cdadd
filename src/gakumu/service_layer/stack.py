"""Use cases for an already configured stack: report, logs, stop."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gakumu.config import BootstrapSettings, read_env_file
from gakumu.domain import StackEndpoints, resolve_endpoints
from gakumu.interfaces.runtime import ContainerRuntime, RuntimeUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StackReport:
    """Runtime status table plus the endpoints the stack publishes."""

    status: str
    endpoints: StackEndpoints


def ensure_runtime(runtime: ContainerRuntime, settings: BootstrapSettings) -> None:
    """Raise `RuntimeUnavailableError` unless the runtime can be invoked."""
    if not runtime.is_available():
        logger.error("Container runtime %r not found", settings.runtime_executable)
        raise RuntimeUnavailableError(settings.runtime_executable)
    logger.debug("Container runtime %r available", settings.runtime_executable)


def load_endpoints(
    settings: BootstrapSettings, db_url_override: str | None = None
) -> StackEndpoints:
    """Resolve the endpoints from the settings and the current env file."""
    values = read_env_file(settings.env_path)
    endpoints = resolve_endpoints(settings, values, db_url_override)
    logger.debug(
        "Endpoints: api=%s health=%s db=%s",
        endpoints.api_url,
        endpoints.health_url,
        endpoints.db_address,
    )
    return endpoints


def report(
    runtime: ContainerRuntime,
    settings: BootstrapSettings,
    db_url_override: str | None = None,
) -> StackReport:
    """Query the runtime for service status and resolve the endpoints."""
    ensure_runtime(runtime, settings)
    endpoints = load_endpoints(settings, db_url_override)
    return StackReport(status=runtime.status(), endpoints=endpoints)


def show_logs(
    runtime: ContainerRuntime,
    settings: BootstrapSettings,
    service: str | None,
    follow: bool = True,
) -> None:
    """Stream logs of *service* (all services when None)."""
    ensure_runtime(runtime, settings)
    logger.info("Showing logs for %s", service or "all services")
    runtime.logs(service, follow=follow)


def stop(
    runtime: ContainerRuntime, settings: BootstrapSettings, volumes: bool = False
) -> None:
    """Stop the stack, removing its volumes when *volumes* is set."""
    ensure_runtime(runtime, settings)
    logger.info("Stopping stack%s", " and removing volumes" if volumes else "")
    runtime.down(volumes=volumes)
