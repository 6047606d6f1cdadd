"""GAKUMU Readiness Interface Package"""

from .errors import ReadinessError, ReadinessTimeoutError
from .probe import ReadinessProbe

__all__ = ["ReadinessError", "ReadinessProbe", "ReadinessTimeoutError"]
