"""Scripted readiness probe.

Answers from a fixed script instead of touching the network; the last answer
repeats once the script is exhausted.

Note:
    Not suitable for production use; primarily for testing and demos.
"""

from collections.abc import Iterable

from gakumu.interfaces.readiness import ReadinessProbe

# pylint: disable=too-few-public-methods


class StaticProbe(ReadinessProbe):
    """A probe whose answers are given up front."""

    def __init__(self, name: str, answers: bool | Iterable[bool] = True) -> None:
        self.name = name
        self.target = f"static:{name}"
        script = [answers] if isinstance(answers, bool) else list(answers)
        if not script:
            raise ValueError("StaticProbe needs at least one answer")
        self._script = script
        self.calls = 0

    def check(self) -> bool:
        index = min(self.calls, len(self._script) - 1)
        self.calls += 1
        return self._script[index]
