"""Wire the runtime, probes and env-file materializer for a settings object."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gakumu import config
from gakumu.adapters.envfile import EnvFileMaterializer
from gakumu.adapters.probes import DatabaseProbe, HttpHealthProbe
from gakumu.adapters.runtime import DockerComposeRuntime
from gakumu.interfaces.readiness import ReadinessProbe
from gakumu.interfaces.runtime import ContainerRuntime
from gakumu.service_layer.bootstrapper import (
    Bootstrapper,
    EventListener,
    ProbeFactory,
)

if TYPE_CHECKING:
    from gakumu.config import BootstrapSettings
    from gakumu.domain import StackEndpoints


@dataclass(frozen=True)
class AppContainer:
    """Everything a CLI command needs to act on the stack."""

    settings: BootstrapSettings
    runtime: ContainerRuntime
    probe_factory: ProbeFactory
    materializer: EnvFileMaterializer
    db_url_override: str | None = None

    def probes(self, endpoints: StackEndpoints) -> Sequence[ReadinessProbe]:
        """Build the readiness probes for *endpoints*."""
        return self.probe_factory(endpoints)


def build_runtime(settings: BootstrapSettings) -> ContainerRuntime:
    """Build the Docker Compose runtime for *settings*."""
    return DockerComposeRuntime(
        executable=settings.runtime_executable,
        project_dir=settings.project_dir,
        compose_files=settings.compose_files,
        project_name=settings.project_name,
    )


def build_probes(endpoints: StackEndpoints) -> list[ReadinessProbe]:
    """Probe the API health endpoint and the database."""
    return [
        HttpHealthProbe(endpoints.health_url, name="api"),
        DatabaseProbe(endpoints.db_url, name="db"),
    ]


def bootstrap(settings: BootstrapSettings) -> AppContainer:
    """Assemble the production adapters for *settings*."""
    return AppContainer(
        settings=settings,
        runtime=build_runtime(settings),
        probe_factory=build_probes,
        materializer=EnvFileMaterializer(settings.env_path, settings.template_path),
        db_url_override=config.get_db_url_override(),
    )


def build_bootstrapper(
    container: AppContainer, on_event: EventListener | None = None
) -> Bootstrapper:
    """Build the bring-up pipeline from an assembled container."""
    return Bootstrapper(
        container.settings,
        container.runtime,
        container.probe_factory,
        container.materializer,
        db_url_override=container.db_url_override,
        on_event=on_event,
    )
