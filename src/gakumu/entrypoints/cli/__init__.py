"""The ``gakumu`` command-line interface."""
