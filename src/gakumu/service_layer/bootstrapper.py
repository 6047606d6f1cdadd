"""Environment bootstrapper.

Brings the local stack from a clean checkout to a running, verified state:

1. check the container runtime is installed;
2. create the env file from its template if it does not exist yet;
3. build the images;
4. start the services in the background;
5. wait for the services (poll their readiness probes, or sleep a fixed
   grace period);
6. collect the runtime's status table and the published endpoints.

Each step is safe to repeat, so re-running the bootstrapper is the recovery
path after any failure. A failing step raises and nothing after it runs;
nothing is rolled back.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from gakumu.config import BootstrapSettings, ReadinessMode
from gakumu.domain import StackEndpoints
from gakumu.interfaces.readiness import ReadinessProbe
from gakumu.interfaces.runtime import ContainerRuntime

from .readiness import wait_until_ready
from .stack import ensure_runtime, load_endpoints

if TYPE_CHECKING:
    from gakumu.adapters.envfile import EnvFileMaterializer

logger = logging.getLogger(__name__)


class BootstrapEvent(Enum):
    """Progress notifications emitted while bootstrapping."""

    STARTED = "started"
    ENV_CREATED = "env-created"
    BUILDING = "building"
    STARTING = "starting"
    WAITING = "waiting"
    READY = "ready"
    COMPLETED = "completed"


ProbeFactory = Callable[[StackEndpoints], Sequence[ReadinessProbe]]
EventListener = Callable[[BootstrapEvent, str], None]


@dataclass(frozen=True)
class BootstrapResult:
    """What a successful bootstrap produced."""

    env_created: bool
    status: str
    endpoints: StackEndpoints
    waited: float


def _ignore(event: BootstrapEvent, message: str) -> None:  # pylint: disable=unused-argument
    return None


class Bootstrapper:  # pylint: disable=too-many-instance-attributes
    """Run the bring-up pipeline against a container runtime.

    Args:
        settings: Bootstrap settings.
        runtime: Runtime that builds, starts and reports on the stack.
        probe_factory: Builds the readiness probes once endpoints are known.
        materializer: Creates the env file from its template when missing.
        db_url_override: Database URL to probe instead of the derived one.
        on_event: Progress listener.
        clock: Monotonic time source used by readiness polling.
        sleep: Function used to wait.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        settings: BootstrapSettings,
        runtime: ContainerRuntime,
        probe_factory: ProbeFactory,
        materializer: EnvFileMaterializer,
        *,
        db_url_override: str | None = None,
        on_event: EventListener | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings
        self._runtime = runtime
        self._probe_factory = probe_factory
        self._materializer = materializer
        self._db_url_override = db_url_override
        self._notify = on_event or _ignore
        self._clock = clock
        self._sleep = sleep

    def run(self) -> BootstrapResult:
        """Execute every step in order.

        Returns:
            BootstrapResult: Outcome of the run.

        Raises:
            RuntimeUnavailableError: The runtime executable is missing.
            TemplateNotFoundError: Neither env file nor template exists.
            InvalidPortError: The env file carries an unusable port.
            RuntimeCommandError: Build, start or status failed.
            ReadinessTimeoutError: Services were not ready in time.
        """
        self._notify(BootstrapEvent.STARTED, "Gakumu Manager - Docker Setup")

        ensure_runtime(self._runtime, self._settings)
        env_created = self._materialize_env_file()
        endpoints = load_endpoints(self._settings, self._db_url_override)

        self._notify(BootstrapEvent.BUILDING, "Building images...")
        self._runtime.build()

        self._notify(BootstrapEvent.STARTING, "Starting services...")
        self._runtime.up()

        waited = self._wait(endpoints)

        status = self._runtime.status()
        self._notify(BootstrapEvent.COMPLETED, "Setup complete!")
        logger.info("Bootstrap finished (env created: %s)", env_created)

        return BootstrapResult(
            env_created=env_created,
            status=status,
            endpoints=endpoints,
            waited=waited,
        )

    def _materialize_env_file(self) -> bool:
        created = self._materializer.ensure()
        if created:
            self._notify(
                BootstrapEvent.ENV_CREATED,
                f"{self._materializer.env_path.name} not found; created it from "
                f"{self._materializer.template_path.name}. Review it and edit as needed.",
            )
        return created

    def _wait(self, endpoints: StackEndpoints) -> float:
        settings = self._settings
        if settings.readiness is ReadinessMode.SLEEP:
            self._notify(
                BootstrapEvent.WAITING,
                f"Waiting {settings.grace_period:g}s for services to start...",
            )
            self._sleep(settings.grace_period)
            return settings.grace_period

        probes = list(self._probe_factory(endpoints))
        self._notify(
            BootstrapEvent.WAITING,
            "Waiting for services to become ready: "
            + (", ".join(probe.name for probe in probes) or "nothing to probe"),
        )
        waited = wait_until_ready(
            probes,
            timeout=settings.readiness_timeout,
            interval=settings.poll_interval,
            backoff=settings.poll_backoff,
            max_interval=settings.max_poll_interval,
            clock=self._clock,
            sleep=self._sleep,
        )
        self._notify(BootstrapEvent.READY, f"Services ready after {waited:.1f}s")
        return waited
