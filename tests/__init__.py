"""GAKUMU test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every ContainerRuntime.
- integration/  : Real subprocesses, sockets and databases.
- functional/   : User stories told through the CLI with the production wiring.
- e2e/          : CLI commands and options against in-memory adapters.
- fixtures/     : Shared pytest plugins (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O beyond tmp_path); prefer fakes
  (InMemoryRuntime, StaticProbe) over mocks at boundaries.
- Time is injected: pass a fake clock/sleep instead of waiting.
- Tests needing Docker (pg_url) are skipped when the daemon is unreachable.
- Markers: unit, contract, integration, functional, e2e (added per folder).
"""
