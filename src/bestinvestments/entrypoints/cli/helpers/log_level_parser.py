"""Parsing of the repeatable ``-L NAME=LEVEL`` logger-level option."""

import logging
import re

import click

# markdown-it (pulled in by rich) is chatty at DEBUG.
DEFAULT_LIB_LEVELS = {"markdown_it": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten option values into NAME=LEVEL items.

    Accepts a single string (as read from an environment variable) or a
    sequence of strings (as collected by a repeatable option); commas and
    whitespace both separate items.
    """
    values = [value] if isinstance(value, str) else list(value)
    return [item for v in values for item in re.split(r"[,\s]+", v) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that turns NAME=LEVEL items into a name->level dict.

    Items are layered over DEFAULT_LIB_LEVELS; later items win.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
