"""Service layer for GAKUMU.

Orchestrates the use cases: bringing the stack up, waiting for readiness and
reporting on, stopping or tailing a running stack. Talks to the outside world
only through `gakumu.interfaces`; wiring happens in `gakumu.bootstrap`.
"""
