"""Configuration utilities for GAKUMU.

This module centralizes the immutable bootstrap settings, the defaults of the
Gakumu Manager stack, and small helpers for reading its env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from dotenv import dotenv_values

from gakumu.interfaces.envfile import EnvFileAccessError

DEFAULT_RUNTIME = "docker"  # pragma: no mutate
DEFAULT_ENV_FILE = ".env"  # pragma: no mutate
DEFAULT_ENV_TEMPLATE = ".env.example"  # pragma: no mutate
DEFAULT_HOST = "localhost"  # pragma: no mutate
DEFAULT_API_PORT = 3000
DEFAULT_DB_PORT = 5432
DEFAULT_HEALTH_PATH = "/health"  # pragma: no mutate
DEFAULT_APP_SERVICE = "app"  # pragma: no mutate

DB_URL_ENV_VAR = "GAKUMU_DB_URL"  # pragma: no mutate


class ReadinessMode(Enum):
    """How the bootstrapper waits for the started services.

    Modes:
    - POLL: poll each service's readiness probe with backoff until all are
      ready or the timeout expires.
    - SLEEP: wait a fixed grace period and carry on regardless.
    """

    POLL = "poll"
    SLEEP = "sleep"


@dataclass(frozen=True)
class BootstrapSettings:  # pylint: disable=too-many-instance-attributes
    """Immutable settings for one bootstrap run.

    Attributes:
        project_dir: Directory holding the compose file and the env files.
        runtime_executable: Name or path of the container runtime executable.
        compose_files: Explicit compose files (empty means runtime discovery).
        project_name: Compose project name override.
        env_filename: Name of the local env file, relative to `project_dir`.
        template_filename: Name of the checked-in template, relative to `project_dir`.
        readiness: Readiness strategy.
        grace_period: Seconds to wait in SLEEP mode.
        readiness_timeout: Overall polling budget in seconds.
        poll_interval: First delay between polling rounds, in seconds.
        poll_backoff: Multiplier applied to the delay after every round.
        max_poll_interval: Upper bound for the delay between rounds.
        host: Host the published service ports are reachable on.
        api_port: Explicit API port; `None` reads `PORT` from the env file.
        db_port: Explicit database port; `None` reads `DB_PORT` from the env file.
        health_path: Path of the API health endpoint.
        app_service: Compose service name of the API container.
    """

    project_dir: Path = field(default_factory=Path.cwd)
    runtime_executable: str = DEFAULT_RUNTIME
    compose_files: tuple[Path, ...] = ()
    project_name: str | None = None
    env_filename: str = DEFAULT_ENV_FILE
    template_filename: str = DEFAULT_ENV_TEMPLATE
    readiness: ReadinessMode = ReadinessMode.POLL
    grace_period: float = 5.0
    readiness_timeout: float = 60.0
    poll_interval: float = 1.0
    poll_backoff: float = 2.0
    max_poll_interval: float = 5.0
    host: str = DEFAULT_HOST
    api_port: int | None = None
    db_port: int | None = None
    health_path: str = DEFAULT_HEALTH_PATH
    app_service: str = DEFAULT_APP_SERVICE

    @property
    def env_path(self) -> Path:
        """Absolute path of the local env file."""
        return self.project_dir / self.env_filename

    @property
    def template_path(self) -> Path:
        """Absolute path of the env template."""
        return self.project_dir / self.template_filename


def read_env_file(path: Path) -> dict[str, str]:
    """Read KEY=VALUE pairs from an env file.

    Keys without a value (``FOO`` on its own line) are dropped. A missing file
    yields an empty mapping.

    Args:
        path: Location of the env file.

    Returns:
        Mapping of variable names to their string values.

    Raises:
        EnvFileAccessError: If the file is not UTF-8 or cannot be read.
    """
    if not path.is_file():
        return {}
    try:
        values = dotenv_values(path, encoding="utf-8")
    except UnicodeDecodeError as e:
        raise EnvFileAccessError(
            path, "read", f"not valid UTF-8 (byte 0x{e.object[e.start]:02x} at offset {e.start})"
        ) from e
    except OSError as e:
        raise EnvFileAccessError(path, "read", e.strerror or str(e)) from e
    return {key: value for key, value in values.items() if value is not None}


def get_db_url_override() -> str | None:
    """Return the database URL from `GAKUMU_DB_URL`, if set and non-empty."""
    return os.environ.get(DB_URL_ENV_VAR) or None
