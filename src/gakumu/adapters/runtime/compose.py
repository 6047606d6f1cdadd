"""Docker Compose runtime adapter.

Shells out to ``<executable> compose ...`` in the project directory. Long
running commands (build, up, logs, down) inherit the terminal so the operator
sees the runtime's own progress output; ``ps`` is captured and returned.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from gakumu.interfaces.runtime import (
    ContainerRuntime,
    RuntimeCommand,
    RuntimeCommandError,
    RuntimeUnavailableError,
)

logger = logging.getLogger(__name__)


class DockerComposeRuntime(ContainerRuntime):
    """ContainerRuntime implementation backed by the ``docker compose`` CLI."""

    def __init__(
        self,
        executable: str = "docker",
        project_dir: Path | None = None,
        compose_files: Sequence[Path] = (),
        project_name: str | None = None,
    ) -> None:
        self._executable = executable
        self._project_dir = project_dir
        self._compose_files = tuple(compose_files)
        self._project_name = project_name

    @property
    def executable(self) -> str:
        """Name or path of the runtime executable."""
        return self._executable

    # --- Preconditions ---

    def is_available(self) -> bool:
        return shutil.which(self._executable) is not None

    # --- Core Operations ---

    def build(self) -> None:
        self._run(RuntimeCommand.BUILD, ["build"])

    def up(self) -> None:
        self._run(RuntimeCommand.UP, ["up", "-d"])

    def status(self) -> str:
        result = self._run(RuntimeCommand.STATUS, ["ps"], capture=True)
        return result.stdout

    # --- Convenience Methods ---

    def logs(self, service: str | None = None, follow: bool = True) -> None:
        args = ["logs"]
        if follow:
            args.append("-f")
        if service:
            args.append(service)
        self._run(RuntimeCommand.LOGS, args)

    def down(self, volumes: bool = False) -> None:
        args = ["down", "-v"] if volumes else ["down"]
        self._run(RuntimeCommand.DOWN, args)

    # --- Internal Helpers ---

    def _base_command(self) -> list[str]:
        if (resolved := shutil.which(self._executable)) is None:
            raise RuntimeUnavailableError(self._executable)
        argv = [resolved, "compose"]
        for compose_file in self._compose_files:
            argv.extend(["-f", str(compose_file)])
        if self._project_name:
            argv.extend(["-p", self._project_name])
        return argv

    def _run(
        self, command: RuntimeCommand, args: list[str], capture: bool = False
    ) -> subprocess.CompletedProcess[str]:
        argv = self._base_command() + args
        logger.debug("Running: %s (cwd=%s)", shlex.join(argv), self._project_dir)
        result = subprocess.run(  # pylint: disable=subprocess-run-check
            argv,
            cwd=self._project_dir,
            capture_output=capture,
            text=True,
        )
        if result.returncode != 0:
            if capture and result.stderr:
                logger.error("%s", result.stderr.strip())
            raise RuntimeCommandError(command.value, result.returncode)
        logger.debug("%s finished with exit code 0", command.value)
        return result
