"""Bootstrap (composition root) for GAKUMU.

Assembles the application at runtime: picks the concrete runtime and probe
adapters for the given settings and hands them to the service layer.

Import rules:
- Entry points get concrete adapters only through *this* package; they never
  import `gakumu.adapters` directly.
- This package may import: `gakumu.adapters`, `gakumu.service_layer`,
  `gakumu.interfaces`, `gakumu.domain`, and `gakumu.config`.
- Inner layers must not import `gakumu.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_bootstrapper, build_probes

__all__ = ["AppContainer", "bootstrap", "build_bootstrapper", "build_probes"]
