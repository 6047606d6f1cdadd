"""Container runtime adapters."""

from .compose import DockerComposeRuntime
from .memory import InMemoryRuntime

__all__ = ["DockerComposeRuntime", "InMemoryRuntime"]
