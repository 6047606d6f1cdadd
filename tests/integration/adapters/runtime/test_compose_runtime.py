"""Integration tests for the Docker Compose runtime adapter.

The adapter really spawns processes; ``docker`` is the fake executable
installed by the `fake_docker` fixture, which records each invocation.
"""

import logging
from pathlib import Path

import pytest

from gakumu.adapters.runtime import DockerComposeRuntime
from gakumu.interfaces.runtime import RuntimeCommandError, RuntimeUnavailableError

# pylint: disable=magic-value-comparison


def test_commands_run_in_project_dir(fake_docker, tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    runtime = DockerComposeRuntime(project_dir=project)

    runtime.build()
    runtime.up()

    assert fake_docker.invocations() == [
        (str(project), "compose build"),
        (str(project), "compose up -d"),
    ]


def test_compose_files_and_project_name_precede_subcommand(
    fake_docker, tmp_path: Path
) -> None:
    runtime = DockerComposeRuntime(
        project_dir=tmp_path,
        compose_files=(Path("compose.yml"), Path("compose.dev.yml")),
        project_name="gakumu",
    )
    runtime.down(volumes=True)
    assert fake_docker.args() == [
        "compose -f compose.yml -f compose.dev.yml -p gakumu down -v"
    ]


@pytest.mark.parametrize(
    ("service", "follow", "expected"),
    [
        ("app", True, "compose logs -f app"),
        ("db", False, "compose logs db"),
        (None, True, "compose logs -f"),
    ],
)
def test_logs_arguments(fake_docker, tmp_path, service, follow, expected) -> None:
    DockerComposeRuntime(project_dir=tmp_path).logs(service, follow=follow)
    assert fake_docker.args() == [expected]


def test_status_returns_captured_table(fake_docker, tmp_path: Path) -> None:
    table = DockerComposeRuntime(project_dir=tmp_path).status()
    assert table.splitlines()[0].split() == ["NAME", "SERVICE", "STATUS"]
    assert "app-1" in table


def test_failed_status_logs_stderr(fake_docker, tmp_path: Path, caplog) -> None:
    """Captured stderr is not lost when a captured command fails."""
    fake_docker.fail("status", 4)

    with caplog.at_level(logging.ERROR, logger="gakumu.adapters.runtime.compose"):
        with pytest.raises(RuntimeCommandError) as exc_info:
            DockerComposeRuntime(project_dir=tmp_path).status()

    assert exc_info.value.command == "status"
    assert exc_info.value.returncode == 4
    assert "fake docker: ps failed" in caplog.text


def test_explicit_executable_path(fake_docker, tmp_path: Path) -> None:
    """An absolute path to the executable works without PATH lookup."""
    runtime = DockerComposeRuntime(
        executable=str(fake_docker.executable), project_dir=tmp_path
    )
    assert runtime.is_available() is True
    runtime.build()
    assert fake_docker.args() == ["compose build"]


def test_unavailable_executable(tmp_path: Path) -> None:
    runtime = DockerComposeRuntime(executable="does-not-exist-xyz", project_dir=tmp_path)

    assert runtime.is_available() is False
    with pytest.raises(RuntimeUnavailableError) as exc_info:
        runtime.build()
    assert exc_info.value.executable == "does-not-exist-xyz"
