"""Rendering of the post-setup endpoint summary and command cheat-sheet."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .hyperlinks import hyperlink

if TYPE_CHECKING:
    from gakumu.config import BootstrapSettings
    from gakumu.domain import StackEndpoints


def render_summary(endpoints: StackEndpoints, settings: BootstrapSettings) -> str:
    """Return the block listing service endpoints and follow-up commands.

    Args:
        endpoints: Resolved stack endpoints.
        settings: Settings the stack was brought up with.

    Returns:
        str: Multi-line text, without a trailing newline.
    """
    compose = f"{settings.runtime_executable} compose"
    app = settings.app_service
    rows = [
        (f"{compose} logs -f {app}", "Follow application logs", f"gakumu logs {app}"),
        (f"{compose} down", "Stop services", "gakumu down"),
        (f"{compose} down -v", "Stop and remove volumes", "gakumu down --volumes"),
    ]
    width = max(len(command) for command, _, _ in rows)

    lines = [
        "Available services:",
        f"  - API: {hyperlink(endpoints.api_url)}",
        f"  - Health Check: {hyperlink(endpoints.health_url)}",
        f"  - PostgreSQL: {endpoints.db_address}",
        "",
        "Useful commands:",
    ]
    lines.extend(
        f"  {command:<{width}}  # {what} ({shortcut})"
        for command, what, shortcut in rows
    )
    return "\n".join(lines)
