"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, fixtures to register that command, obtain a CliRunner and run tests
within an isolated filesystem, and a `stack_app` fixture that swaps the
production composition root for an in-memory runtime and static probes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from gakumu.adapters.envfile import EnvFileMaterializer
from gakumu.adapters.probes import StaticProbe
from gakumu.adapters.runtime import InMemoryRuntime
from gakumu.bootstrap import AppContainer
from gakumu.entrypoints.cli import stack as stack_cli
from gakumu.entrypoints.cli.main import gakumu

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG..CRITICAL messages on the 'gakumu.demo' logger and additional
    messages on a 'some.thirdparty' logger to exercise logger-level filtering
    and flight-recorder behavior.
    """
    logger = logging.getLogger("gakumu.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    gakumu.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(gakumu, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@dataclass
class StackApp:
    """Knobs for the in-memory stack the CLI commands will talk to."""

    runtime: InMemoryRuntime = field(default_factory=InMemoryRuntime)
    answers: dict[str, bool] = field(default_factory=lambda: {"api": True, "db": True})
    db_url_override: str | None = None
    containers: list[AppContainer] = field(default_factory=list)

    def build(self, settings) -> AppContainer:
        """Stand-in for `gakumu.bootstrap.bootstrap`."""

        def probe_factory(endpoints):  # pylint: disable=unused-argument
            return [StaticProbe(name, ready) for name, ready in self.answers.items()]

        container = AppContainer(
            settings=settings,
            runtime=self.runtime,
            probe_factory=probe_factory,
            materializer=EnvFileMaterializer(settings.env_path, settings.template_path),
            db_url_override=self.db_url_override,
        )
        self.containers.append(container)
        return container


@pytest.fixture
def stack_app(monkeypatch, fs) -> StackApp:
    """Route every stack command to an in-memory runtime.

    Runs inside the isolated filesystem, which already holds an
    ``.env.example`` with ``PORT=3000``.
    """
    Path(".env.example").write_text("PORT=3000\n", encoding="utf-8")
    app = StackApp()
    monkeypatch.setattr(stack_cli, "build_app", app.build)
    return app
