"""Adapters (outbound) for GAKUMU.

Concrete implementations of the interfaces: the Docker Compose runtime, an
in-memory runtime for tests, HTTP and database readiness probes, and the
env-file materializer.

Dependency rule: may import `gakumu.interfaces`, `gakumu.domain` and
`gakumu.config`; never `gakumu.service_layer` or `gakumu.entrypoints`.
"""
