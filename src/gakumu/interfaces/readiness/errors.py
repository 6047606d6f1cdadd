"""Exceptions for readiness checks."""

from collections.abc import Sequence


class ReadinessError(Exception):
    """Base class for readiness errors."""


class ReadinessTimeoutError(ReadinessError):
    """Services did not become ready within the allotted time.

    Attributes:
        pending (tuple[str, ...]): Names of the probes that never succeeded.
        timeout (float): The polling budget, in seconds.
    """

    def __init__(self, pending: Sequence[str], timeout: float):
        super().__init__(
            f"Services not ready after {timeout:g}s: {', '.join(pending)}."
        )
        self.pending = tuple(pending)
        self.timeout = timeout
