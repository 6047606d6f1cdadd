"""Readiness probe adapters."""

from .database import DatabaseProbe
from .http import HttpHealthProbe
from .static import StaticProbe

__all__ = ["DatabaseProbe", "HttpHealthProbe", "StaticProbe"]
