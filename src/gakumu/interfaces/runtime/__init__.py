"""GAKUMU Container Runtime Interface Package"""

from .errors import (
    ContainerRuntimeError,
    RuntimeCommandError,
    RuntimeUnavailableError,
)
from .runtime import ContainerRuntime, RuntimeCommand

__all__ = [
    "ContainerRuntime",
    "ContainerRuntimeError",
    "RuntimeCommand",
    "RuntimeCommandError",
    "RuntimeUnavailableError",
]
