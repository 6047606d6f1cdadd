"""Container runtime interface definitions."""

import abc
from enum import Enum


class RuntimeCommand(Enum):
    """Operations a container runtime is asked to perform."""

    BUILD = "build"
    UP = "up"
    STATUS = "status"
    LOGS = "logs"
    DOWN = "down"


class ContainerRuntime(abc.ABC):
    """Abstract base class for the runtime that manages the service stack.

    Every operation blocks until the runtime has finished. Failures are
    reported by raising `RuntimeCommandError`; none of them is retried.
    """

    # --- Preconditions ---

    @abc.abstractmethod
    def is_available(self) -> bool:
        """Check whether the runtime can be invoked at all.

        Returns:
            bool: True if the runtime executable is present, False otherwise.
        """

    # --- Core Operations ---

    @abc.abstractmethod
    def build(self) -> None:
        """Build the images of all declared services.

        Raises:
            RuntimeCommandError: If the build fails.
        """

    @abc.abstractmethod
    def up(self) -> None:
        """Start all declared services in the background.

        Must converge: starting an already running stack is not an error and
        does not duplicate containers.

        Raises:
            RuntimeCommandError: If the services cannot be started.
        """

    @abc.abstractmethod
    def status(self) -> str:
        """Return the runtime's human-readable status table of all services.

        Raises:
            RuntimeCommandError: If the status cannot be queried.
        """

    # --- Convenience Methods ---

    @abc.abstractmethod
    def logs(self, service: str | None = None, follow: bool = True) -> None:
        """Stream service logs to the terminal.

        Args:
            service: Service to show logs for; all services when None.
            follow: Keep streaming new output until interrupted.

        Raises:
            RuntimeCommandError: If the runtime reports a failure.
        """

    @abc.abstractmethod
    def down(self, volumes: bool = False) -> None:
        """Stop and remove the stack's containers.

        Args:
            volumes: Also remove named volumes (destroys database data).

        Raises:
            RuntimeCommandError: If the runtime reports a failure.
        """
