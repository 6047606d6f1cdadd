"""Interface for readiness probes."""

import abc

# pylint: disable=too-few-public-methods


class ReadinessProbe(abc.ABC):
    """Contract for a single readiness check against one service.

    Attributes:
        name: Short label of the probed service (e.g. "api").
        target: Display-safe description of what is probed (URL, address).
    """

    name: str
    target: str

    @abc.abstractmethod
    def check(self) -> bool:
        """Probe the service once.

        Returns:
            bool: True if the service answered correctly, False otherwise.

        Note:
            Implementations may also raise; callers treat any exception as
            "not ready yet".
        """
