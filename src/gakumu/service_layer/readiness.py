"""Waiting for services to become ready.

`wait_until_ready` polls a set of probes until every one of them has
succeeded once, backing off exponentially between rounds and giving up after
an overall timeout. Probes that already succeeded are not asked again.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from gakumu.interfaces.readiness import ReadinessProbe, ReadinessTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single probe check."""

    name: str
    target: str
    ready: bool
    error: str | None = None


def run_probe(probe: ReadinessProbe) -> ProbeResult:
    """Run *probe* once, turning any exception into a not-ready result."""
    try:
        ready = probe.check()
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("Probe %s raised %s: %s", probe.name, type(e).__name__, e)
        return ProbeResult(probe.name, probe.target, False, f"{type(e).__name__}: {e}")
    return ProbeResult(probe.name, probe.target, bool(ready))


def check_once(probes: Sequence[ReadinessProbe]) -> list[ProbeResult]:
    """Run every probe once, in order."""
    return [run_probe(probe) for probe in probes]


def wait_until_ready(  # pylint: disable=too-many-arguments
    probes: Sequence[ReadinessProbe],
    *,
    timeout: float,
    interval: float = 1.0,
    backoff: float = 2.0,
    max_interval: float = 5.0,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> float:
    """Block until every probe has reported ready.

    Every pending probe is checked at least once, even with a zero timeout.
    Between rounds the delay starts at *interval*, is multiplied by *backoff*
    and is capped at *max_interval* and at the time left.

    Args:
        probes: Probes to satisfy.
        timeout: Overall budget in seconds.
        interval: First delay between rounds.
        backoff: Delay multiplier applied after each round.
        max_interval: Upper bound for the delay.
        clock: Monotonic time source.
        sleep: Function used to wait between rounds.

    Returns:
        float: Seconds spent waiting.

    Raises:
        ReadinessTimeoutError: If some probes were still pending at the deadline.
    """
    start = clock()
    deadline = start + timeout
    delay = interval
    pending = list(probes)
    attempt = 0

    while True:
        attempt += 1
        pending = [probe for probe in pending if not run_probe(probe).ready]
        if not pending:
            elapsed = clock() - start
            logger.info("All services ready after %.1fs (%d rounds)", elapsed, attempt)
            return elapsed

        remaining = deadline - clock()
        if remaining <= 0:
            names = [probe.name for probe in pending]
            logger.warning("Readiness timed out; still waiting on %s", ", ".join(names))
            raise ReadinessTimeoutError(names, timeout)

        pause = min(delay, remaining)
        logger.debug(
            "Round %d: waiting on %s; next check in %.1fs",
            attempt,
            ", ".join(probe.name for probe in pending),
            pause,
        )
        sleep(pause)
        delay = min(delay * backoff, max_interval)
