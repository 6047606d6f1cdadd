"""Global pytest fixtures for GAKUMU."""

pytest_plugins = [
    "tests.fixtures.runtime",
    "tests.fixtures.postgres",
]
