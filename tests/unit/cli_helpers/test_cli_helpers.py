"""Unit tests for `gakumu.entrypoints.cli.helpers`.

Covers two areas:
1) OSC-8 hyperlink support detection heuristic and rendering.
2) The post-setup endpoint summary.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gakumu.config import BootstrapSettings
from gakumu.domain import resolve_endpoints
from gakumu.entrypoints.cli.helpers import hyperlinks, render_summary

# ---------------------------------------------------------------------------
# Test utilities
# ---------------------------------------------------------------------------


class FakeTTYStream:
    """Minimal TTY-like stream; only `isatty()` matters to the heuristic."""

    encoding = "utf-8"

    def isatty(self) -> bool:  # pylint: disable=no-self-use
        """Pretend to be an interactive terminal."""
        return True


class FakeNonTTY:
    """Stream that is not a terminal (piped or redirected)."""

    def isatty(self) -> bool:  # pylint: disable=no-self-use
        """Report a non-interactive stream."""
        return False


@pytest.fixture(autouse=True)
def _clean_osc8_env(monkeypatch):
    """Clear terminal-identifying env vars before each test."""
    for k in ("TERM_PROGRAM", "WT_SESSION", "VTE_VERSION", "TERM"):
        monkeypatch.delenv(k, raising=False)


# ---------------------------------------------------------------------------
# OSC-8 hyperlinks
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({"TERM_PROGRAM": "vscode"}, True),
        ({"TERM_PROGRAM": "Apple_Terminal"}, True),
        ({"TERM_PROGRAM": "iTerm.app"}, True),
        ({"TERM_PROGRAM": "WezTerm"}, True),
        ({"TERM_PROGRAM": "kitty"}, True),
        ({"WT_SESSION": "1"}, True),
        ({"VTE_VERSION": "6000"}, True),
        ({"TERM": "alacritty"}, True),
        ({"TERM": "konsole-256color"}, True),
        ({}, False),
    ],
)
def test_supports_osc8_matrix(monkeypatch, env, expected):
    """Verify heuristic returns expected result for each terminal signal."""
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    assert hyperlinks.supports_osc8(stream=FakeTTYStream()) is expected  # type: ignore[arg-type]


def test_supports_osc8_non_tty(monkeypatch):
    """Return False when the stream is not a TTY, regardless of env."""
    monkeypatch.setenv("TERM_PROGRAM", "vscode")
    assert hyperlinks.supports_osc8(stream=FakeNonTTY()) is False  # type: ignore[arg-type]


def test_hyperlink_wraps_url_in_osc8(monkeypatch):
    """Supported terminals get the OSC-8 escape sequence."""
    monkeypatch.setenv("TERM_PROGRAM", "vscode")
    link = hyperlinks.hyperlink("http://localhost:3000", stream=FakeTTYStream())  # type: ignore[arg-type]
    assert link == "\x1b]8;;http://localhost:3000\x07http://localhost:3000\x1b]8;;\x07"


def test_hyperlink_plain_when_unsupported():
    """Other streams get the bare URL."""
    url = "http://localhost:3000"
    assert hyperlinks.hyperlink(url, stream=FakeNonTTY()) == url  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Endpoint summary
# ---------------------------------------------------------------------------


def test_render_summary_lists_endpoints_and_commands(tmp_path: Path) -> None:
    """The summary names every endpoint and the follow-up commands."""
    settings = BootstrapSettings(project_dir=tmp_path)
    endpoints = resolve_endpoints(settings, {})

    lines = render_summary(endpoints, settings).splitlines()

    assert lines[:4] == [
        "Available services:",
        "  - API: http://localhost:3000",
        "  - Health Check: http://localhost:3000/health",
        "  - PostgreSQL: localhost:5432",
    ]
    assert "Useful commands:" in lines
    commands = "\n".join(lines[lines.index("Useful commands:") + 1 :])
    assert "docker compose logs -f app" in commands
    assert "docker compose down -v" in commands
    assert "gakumu down --volumes" in commands


def test_render_summary_follows_settings(tmp_path: Path) -> None:
    """Runtime, app service and ports come from the settings."""
    settings = BootstrapSettings(
        project_dir=tmp_path,
        runtime_executable="podman",
        app_service="api",
        api_port=8080,
        db_port=6543,
    )
    summary = render_summary(resolve_endpoints(settings, {}), settings)

    assert "  - API: http://localhost:8080" in summary
    assert "  - PostgreSQL: localhost:6543" in summary
    assert "podman compose logs -f api" in summary
    assert "gakumu logs api" in summary
