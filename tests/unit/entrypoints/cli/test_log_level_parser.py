"""Unit tests for the CLI log level parser.

These tests exercise bestinvestments.entrypoints.cli.helpers.log_level_parser,
covering defaults, override semantics, input normalization (commas/spaces),
case-insensitivity, and error handling for malformed input.
"""

import logging
import types

import click
import pytest

from bestinvestments.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)


def make_ctx():
    """Create a minimal Click context stub; the callback never reads it."""
    return types.SimpleNamespace()


def test_empty_uses_defaults():
    """When no levels are provided, return the default library logger levels."""
    assert parse_log_level(make_ctx(), None, ()) == {"markdown_it": logging.WARNING}


def test_defaults_are_not_mutated():
    """Parsing overrides never leaks into the module-level defaults."""
    parse_log_level(make_ctx(), None, ("markdown_it=DEBUG",))
    assert DEFAULT_LIB_LEVELS == {"markdown_it": logging.WARNING}


def test_repeated_flags_override_order():
    """Later repeated CLI flags override earlier ones for the same logger."""
    value = ("bestinvestments=INFO", "markdown_it=ERROR", "bestinvestments=WARNING")
    out = parse_log_level(make_ctx(), None, value)
    assert out["bestinvestments"] == logging.WARNING
    assert out["markdown_it"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces():
    """Accept a plain string (e.g. from an env var) with commas and spaces."""
    value = "bestinvestments=INFO,  rich=WARNING markdown_it=ERROR"
    out = parse_log_level(make_ctx(), None, value)
    assert out["bestinvestments"] == logging.INFO
    assert out["rich"] == logging.WARNING
    assert out["markdown_it"] == logging.ERROR


def test_case_insensitive_levels():
    """Level names should be parsed case-insensitively."""
    out = parse_log_level(
        make_ctx(), None, ("bestinvestments.domain=info", "markdown_it=WaRnInG")
    )
    assert out["bestinvestments.domain"] == logging.INFO
    assert out["markdown_it"] == logging.WARNING


@pytest.mark.parametrize("item", ["not-a-pair", "=INFO"])
def test_invalid_pair_raises(item):
    """Malformed NAME=LEVEL pairs should raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(make_ctx(), None, (item,))


def test_invalid_level_raises():
    """Unknown level names should raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="Invalid log level: LOUD"):
        parse_log_level(make_ctx(), None, ("bestinvestments=LOUD",))
