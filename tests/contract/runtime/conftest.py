"""Pytest fixtures for ContainerRuntime contract tests.

Provided fixtures
-----------------
- **runtime_case**: Parametrized backend factory returning a `RuntimeCase`
  with a fresh `ContainerRuntime` plus hooks to make a command fail and to
  read back which commands ran. Supports `"memory"` (the in-memory runtime)
  and `"compose"` (the Docker Compose adapter driving a fake ``docker``
  executable).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import pytest

from gakumu.adapters.runtime import DockerComposeRuntime, InMemoryRuntime
from gakumu.interfaces.runtime import ContainerRuntime, RuntimeCommand

COMPOSE_SUBCOMMANDS = {
    "build": RuntimeCommand.BUILD,
    "up": RuntimeCommand.UP,
    "ps": RuntimeCommand.STATUS,
    "logs": RuntimeCommand.LOGS,
    "down": RuntimeCommand.DOWN,
}


@dataclass
class RuntimeCase:
    """A runtime under test plus backend-specific hooks."""

    runtime: ContainerRuntime
    fail: Callable[[RuntimeCommand, int], None]
    commands: Callable[[], list[RuntimeCommand]]


def _memory_case() -> RuntimeCase:
    runtime = InMemoryRuntime()

    def fail(command: RuntimeCommand, code: int) -> None:
        runtime.failures[command] = code

    return RuntimeCase(runtime=runtime, fail=fail, commands=lambda: list(runtime.calls))


def _compose_case(request: pytest.FixtureRequest) -> RuntimeCase:
    fake_docker = request.getfixturevalue("fake_docker")
    tmp_path = request.getfixturevalue("tmp_path")
    runtime = DockerComposeRuntime(executable="docker", project_dir=tmp_path)

    def fail(command: RuntimeCommand, code: int) -> None:
        fake_docker.fail(command.value, code)

    def commands() -> list[RuntimeCommand]:
        # args look like "compose up -d"
        return [COMPOSE_SUBCOMMANDS[args.split()[1]] for args in fake_docker.args()]

    return RuntimeCase(runtime=runtime, fail=fail, commands=commands)


@pytest.fixture(params=["memory", "compose"])
def runtime_case(request: pytest.FixtureRequest) -> RuntimeCase:
    """Return a fresh runtime for the requested backend."""
    match request.param:
        case "memory":
            return _memory_case()
        case "compose":
            return _compose_case(request)
        case _:
            raise ValueError(f"unknown runtime type: {request.param}")
