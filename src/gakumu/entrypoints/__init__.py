"""Entrypoints (inbound adapters) for GAKUMU.

Expose the tooling to the outside world: the ``gakumu`` CLI. Parse and
validate inputs, call the composition root and service layer, and present
results.

Dependency rule: may import `gakumu.bootstrap` and `gakumu.service_layer`;
avoid importing `gakumu.adapters` directly.
"""
