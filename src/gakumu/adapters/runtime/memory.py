"""In-memory container runtime.

Keeps the stack state in plain Python objects and records every call, so the
bootstrap pipeline can be exercised without a container engine.

Note:
    Not suitable for production use; primarily for testing and demos.
"""

from collections.abc import Iterable, Mapping

from gakumu.interfaces.runtime import (
    ContainerRuntime,
    RuntimeCommand,
    RuntimeCommandError,
)

DEFAULT_SERVICES = ("app", "db")


class InMemoryRuntime(ContainerRuntime):
    """ContainerRuntime implementation that simulates a compose stack.

    Args:
        available: What `is_available` reports.
        failures: Exit codes to fail specific commands with.
        services: Names of the declared services.
    """

    def __init__(
        self,
        available: bool = True,
        failures: Mapping[RuntimeCommand, int] | None = None,
        services: Iterable[str] = DEFAULT_SERVICES,
    ) -> None:
        self.available = available
        self.failures = dict(failures or {})
        self.services = tuple(services)
        self.calls: list[RuntimeCommand] = []
        self.log_requests: list[tuple[str | None, bool]] = []
        self.images_built = 0
        self.running: set[str] = set()
        self.volumes_present = False

    def count(self, command: RuntimeCommand) -> int:
        """Return how many times *command* was invoked."""
        return self.calls.count(command)

    # --- Preconditions ---

    def is_available(self) -> bool:
        return self.available

    # --- Core Operations ---

    def build(self) -> None:
        self._record(RuntimeCommand.BUILD)
        self.images_built += 1

    def up(self) -> None:
        self._record(RuntimeCommand.UP)
        self.running = set(self.services)
        self.volumes_present = True

    def status(self) -> str:
        self._record(RuntimeCommand.STATUS)
        lines = [f"{'NAME':<12}STATUS"]
        for service in self.services:
            state = "running" if service in self.running else "exited"
            lines.append(f"{service:<12}{state}")
        return "\n".join(lines) + "\n"

    # --- Convenience Methods ---

    def logs(self, service: str | None = None, follow: bool = True) -> None:
        self._record(RuntimeCommand.LOGS)
        self.log_requests.append((service, follow))

    def down(self, volumes: bool = False) -> None:
        self._record(RuntimeCommand.DOWN)
        self.running.clear()
        if volumes:
            self.volumes_present = False

    # --- Internal Helpers ---

    def _record(self, command: RuntimeCommand) -> None:
        self.calls.append(command)
        if (code := self.failures.get(command)) is not None:
            raise RuntimeCommandError(command.value, code)
