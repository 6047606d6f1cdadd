"""Domain layer for GAKUMU.

Pure value objects describing the local stack. No I/O, no imports from
adapters, service layer or entrypoints.
"""

from .endpoints import StackEndpoints, resolve_endpoints
from .errors import DomainError, InvalidDatabaseUrlError, InvalidPortError

__all__ = [
    "DomainError",
    "InvalidDatabaseUrlError",
    "InvalidPortError",
    "StackEndpoints",
    "resolve_endpoints",
]
