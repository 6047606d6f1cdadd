"""GAKUMU stack commands.

Commands
- `setup`  : Bring the local stack up from a clean checkout (safe to re-run).
- `status` : Show service status and the published endpoints.
- `logs`   : Stream service logs (default: the API service, followed).
- `down`   : Stop the stack; `--volumes` also wipes the database volume.
- `check`  : Probe the API health endpoint and the database once.

Every command takes the same stack options (project directory, runtime,
compose files, env file names, host and ports), each bound to a ``GAKUMU_*``
environment variable.

Failure Modes
- Runtime executable missing → exit 1 before anything is touched.
- Build/start failure → exit with the runtime command's own exit code.
- Readiness timeout or missing env template → exit 1.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any

import click

from gakumu import config
from gakumu.bootstrap import AppContainer, build_bootstrapper
from gakumu.bootstrap import bootstrap as build_app
from gakumu.config import BootstrapSettings, ReadinessMode
from gakumu.domain import DomainError
from gakumu.interfaces.envfile import EnvFileError
from gakumu.interfaces.readiness import ReadinessError
from gakumu.interfaces.runtime import RuntimeCommandError, RuntimeUnavailableError
from gakumu.service_layer import stack
from gakumu.service_layer.bootstrapper import BootstrapEvent
from gakumu.service_layer.readiness import check_once

from .helpers import error, info, notice, render_summary, success, warn

MAX_EXIT_CODE = 255

MISSING_RUNTIME_MSG = (
    "{executable} not found. Please install Docker first.\n\n"
    "See https://docs.docker.com/get-docker/ or point --runtime / GAKUMU_RUNTIME "
    "at another compose-compatible executable."
)

WIPE_VOLUMES_WARNING = (
    "This will stop the stack and remove its volumes.\n"
    "All database data will be lost."
)


class StackCommandError(click.ClickException):
    """ClickException with a configurable exit code and a styled message."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: IO[Any] | None = None) -> None:  # pylint: disable=unused-argument
        error(self.format_message())


def _exit_code(returncode: int) -> int:
    """Map a child exit status (negative for signals) to a usable exit code."""
    return returncode if 0 < returncode <= MAX_EXIT_CODE else 1


@contextmanager
def stack_errors() -> Iterator[None]:
    """Translate service-layer exceptions into `StackCommandError`."""
    try:
        yield
    except RuntimeUnavailableError as e:
        raise StackCommandError(
            MISSING_RUNTIME_MSG.format(executable=e.executable)
        ) from e
    except RuntimeCommandError as e:
        raise StackCommandError(str(e), exit_code=_exit_code(e.returncode)) from e
    except (EnvFileError, DomainError, ReadinessError) as e:
        raise StackCommandError(str(e)) from e


def stack_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by every stack command."""
    options = [
        click.option(
            "--project-dir",
            type=click.Path(file_okay=False, path_type=Path),
            default=Path("."),
            envvar="GAKUMU_PROJECT_DIR",
            show_envvar=True,
            show_default=True,
            help="Directory holding the compose file and the env files.",
        ),
        click.option(
            "--runtime",
            "runtime_executable",
            default=config.DEFAULT_RUNTIME,
            envvar="GAKUMU_RUNTIME",
            show_envvar=True,
            show_default=True,
            help="Container runtime executable (must provide a 'compose' subcommand).",
        ),
        click.option(
            "--compose-file",
            "-f",
            "compose_files",
            multiple=True,
            type=click.Path(dir_okay=False, path_type=Path),
            envvar="GAKUMU_COMPOSE_FILE",
            show_envvar=True,
            help="Compose file(s) to use. Repeatable. Defaults to runtime discovery.",
        ),
        click.option(
            "--project-name",
            "-p",
            default=None,
            envvar="GAKUMU_PROJECT_NAME",
            show_envvar=True,
            help="Compose project name.",
        ),
        click.option(
            "--env-file",
            "env_filename",
            default=config.DEFAULT_ENV_FILE,
            envvar="GAKUMU_ENV_FILE",
            show_envvar=True,
            show_default=True,
            help="Local env file, relative to --project-dir.",
        ),
        click.option(
            "--env-template",
            "template_filename",
            default=config.DEFAULT_ENV_TEMPLATE,
            envvar="GAKUMU_ENV_TEMPLATE",
            show_envvar=True,
            show_default=True,
            help="Template the env file is created from, relative to --project-dir.",
        ),
        click.option(
            "--host",
            default=config.DEFAULT_HOST,
            envvar="GAKUMU_HOST",
            show_envvar=True,
            show_default=True,
            help="Host the published ports are reachable on.",
        ),
        click.option(
            "--api-port",
            type=click.IntRange(1, 65535),
            default=None,
            envvar="GAKUMU_API_PORT",
            show_envvar=True,
            help="API port. Defaults to PORT from the env file, else 3000.",
        ),
        click.option(
            "--db-port",
            type=click.IntRange(1, 65535),
            default=None,
            envvar="GAKUMU_DB_PORT",
            show_envvar=True,
            help="Database port. Defaults to DB_PORT from the env file, else 5432.",
        ),
        click.option(
            "--health-path",
            default=config.DEFAULT_HEALTH_PATH,
            envvar="GAKUMU_HEALTH_PATH",
            show_envvar=True,
            show_default=True,
            help="Path of the API health endpoint.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _settings(project_dir: Path, **options: Any) -> BootstrapSettings:
    compose_files = tuple(options.pop("compose_files", ()))
    return BootstrapSettings(
        project_dir=project_dir.resolve(), compose_files=compose_files, **options
    )


def _container(project_dir: Path, **options: Any) -> AppContainer:
    return build_app(_settings(project_dir, **options))


def _echo_report(status: str, summary: str) -> None:
    click.echo(status.rstrip("\n"))
    click.echo()
    click.echo(summary)


# --- setup ----------------------------------------------------------------------


def _on_event(event: BootstrapEvent, message: str) -> None:
    if event is BootstrapEvent.STARTED:
        info(message, bold=True)
    elif event is BootstrapEvent.ENV_CREATED:
        warn(message)
    elif event is BootstrapEvent.WAITING:
        notice(message)
    elif event in (BootstrapEvent.READY, BootstrapEvent.COMPLETED):
        success(message)
    else:
        info(message)


@click.command()
@stack_options
@click.option(
    "--readiness",
    type=click.Choice([mode.value for mode in ReadinessMode], case_sensitive=False),
    default=ReadinessMode.POLL.value,
    envvar="GAKUMU_READINESS",
    show_envvar=True,
    show_default=True,
    help=(
        "'poll' checks the API health endpoint and the database until both "
        "answer; 'sleep' waits --grace-period seconds and carries on."
    ),
)
@click.option(
    "--grace-period",
    type=click.FloatRange(min=0),
    default=5.0,
    envvar="GAKUMU_GRACE_PERIOD",
    show_envvar=True,
    show_default=True,
    help="Seconds to wait in 'sleep' readiness mode.",
)
@click.option(
    "--readiness-timeout",
    type=click.FloatRange(min=0),
    default=60.0,
    envvar="GAKUMU_READINESS_TIMEOUT",
    show_envvar=True,
    show_default=True,
    help="Give up polling after this many seconds ('poll' mode).",
)
@click.option(
    "--poll-interval",
    type=click.FloatRange(min=0, min_open=True),
    default=1.0,
    envvar="GAKUMU_POLL_INTERVAL",
    show_envvar=True,
    show_default=True,
    help="First delay between readiness checks; doubles up to 5s.",
)
def setup(  # pylint: disable=too-many-arguments
    project_dir: Path,
    readiness: str,
    grace_period: float,
    readiness_timeout: float,
    poll_interval: float,
    **options: Any,
) -> None:
    """Build and start the local stack, then report where to reach it.

    Safe to re-run: an existing env file is never touched, images are rebuilt
    and running services are left running.
    """
    container = _container(
        project_dir,
        readiness=ReadinessMode(readiness.lower()),
        grace_period=grace_period,
        readiness_timeout=readiness_timeout,
        poll_interval=poll_interval,
        **options,
    )
    with stack_errors():
        result = build_bootstrapper(container, on_event=_on_event).run()

    click.echo()
    info("Service status:", bold=True)
    _echo_report(result.status, render_summary(result.endpoints, container.settings))


# --- status / logs / down -------------------------------------------------------


@click.command()
@stack_options
def status(project_dir: Path, **options: Any) -> None:
    """Show service status and the published endpoints."""
    container = _container(project_dir, **options)
    with stack_errors():
        report = stack.report(
            container.runtime, container.settings, container.db_url_override
        )
    _echo_report(report.status, render_summary(report.endpoints, container.settings))


@click.command()
@stack_options
@click.argument("service", required=False)
@click.option(
    "--all",
    "all_services",
    is_flag=True,
    help="Show logs of every service instead of just SERVICE.",
)
@click.option(
    "--follow/--no-follow",
    default=True,
    show_default=True,
    help="Keep streaming new log lines until interrupted.",
)
def logs(
    project_dir: Path,
    service: str | None,
    all_services: bool,
    follow: bool,
    **options: Any,
) -> None:
    """Stream logs of SERVICE (default: the API service)."""
    container = _container(project_dir, **options)
    target = None if all_services else service or container.settings.app_service
    with stack_errors():
        stack.show_logs(container.runtime, container.settings, target, follow=follow)


@click.command()
@stack_options
@click.option(
    "--volumes",
    is_flag=True,
    help="Also remove volumes (wipes the database).",
)
@click.option("--force", is_flag=True, help="Remove volumes without confirmation.")
def down(project_dir: Path, volumes: bool, force: bool, **options: Any) -> None:
    """Stop the local stack."""
    container = _container(project_dir, **options)
    if volumes and not force:
        warn(WIPE_VOLUMES_WARNING)
        click.confirm("Are you sure you want to proceed?", abort=True)
    with stack_errors():
        stack.stop(container.runtime, container.settings, volumes=volumes)
    success("Stack stopped" + (" and volumes removed." if volumes else "."))


# --- check ----------------------------------------------------------------------


@click.command()
@stack_options
def check(project_dir: Path, **options: Any) -> None:
    """Probe the API health endpoint and the database once."""
    container = _container(project_dir, **options)
    with stack_errors():
        endpoints = stack.load_endpoints(container.settings, container.db_url_override)
        probes = container.probes(endpoints)
    results = check_once(probes)

    for result in results:
        line = f"{result.name:<4} {result.target}"
        if result.ready:
            success(f"{line}: ready")
        else:
            error(f"{line}: not ready" + (f" ({result.error})" if result.error else ""))

    if pending := [result.name for result in results if not result.ready]:
        raise StackCommandError(f"Not ready: {', '.join(pending)}")


STACK_COMMANDS = (setup, status, logs, down, check)


def register(group: click.Group) -> None:
    """Register every stack command on *group*."""
    for command in STACK_COMMANDS:
        group.add_command(command)

