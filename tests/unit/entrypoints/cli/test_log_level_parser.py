"""Unit tests for the CLI log level parser.

These tests exercise gakumu.entrypoints.cli.helpers.log_level_parser.parse_log_level,
covering default behavior, override semantics, input normalization (commas/spaces),
case-insensitivity, and error handling for malformed input.
"""

import logging
import types

import click
import pytest

from gakumu.entrypoints.cli.helpers.log_level_parser import parse_log_level


def make_ctx():
    """Create a minimal Click context stub; the callback ignores it."""
    return types.SimpleNamespace()


def test_empty_uses_defaults():
    """When no levels are provided, return the default library logger levels."""
    assert parse_log_level(make_ctx(), None, ()) == {
        "httpx": logging.WARNING,
        "httpcore": logging.WARNING,
        "sqlalchemy": logging.WARNING,
    }


def test_repeated_flags_override_order():
    """Later repeated CLI flags override earlier ones for the same logger."""
    value = ("httpx=INFO", "sqlalchemy=ERROR", "httpx=DEBUG")
    out = parse_log_level(make_ctx(), None, value)
    assert out["httpx"] == logging.DEBUG
    assert out["sqlalchemy"] == logging.ERROR
    assert out["httpcore"] == logging.WARNING


def test_envvar_string_with_commas_and_spaces():
    """Accept a plain string (e.g. from an env var) with commas and spaces."""
    out = parse_log_level(make_ctx(), None, "httpx=INFO,  gakumu=DEBUG sqlalchemy=ERROR")
    assert out["httpx"] == logging.INFO
    assert out["gakumu"] == logging.DEBUG
    assert out["sqlalchemy"] == logging.ERROR


def test_case_insensitive_levels():
    """Level names should be parsed case-insensitively."""
    out = parse_log_level(make_ctx(), None, ("httpx=info", "sqlalchemy=WaRnInG"))
    assert out["httpx"] == logging.INFO
    assert out["sqlalchemy"] == logging.WARNING


def test_invalid_pair_raises():
    """Malformed NAME=LEVEL pairs should raise click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_log_level(make_ctx(), None, ("not-a-pair",))


def test_invalid_level_raises():
    """Unknown level names should raise click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_log_level(make_ctx(), None, ("httpx=LOUD",))
