"""GAKUMU

Developer tooling for the Gakumu Manager academic-records backend.
Brings the local Docker Compose stack (API + PostgreSQL) up from a clean
checkout and keeps re-runs safe.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
