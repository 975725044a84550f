"""Helpers for parsing logger-level CLI options.

The ``-L/--logger-level`` option takes NAME=LEVEL items, either repeated or
comma/space separated (as they arrive from ``CALQUE_LOGGER_LEVELS``). Items
are merged over `DEFAULT_LIB_LEVELS`.
"""

import logging
import re

import click

# babel logs locale-data loading at DEBUG, which floods -vvv output
DEFAULT_LIB_LEVELS = {"babel": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten the raw option value into non-empty NAME=LEVEL items.

    Args:
        value: A single string (possibly holding several items) or the
            sequence Click passes for a repeatable option.

    Returns:
        list[str]: The items, in the order given.
    """
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_level(level_str: str) -> int:
    level = logging.getLevelNamesMapping().get(level_str.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_str}")
    return level


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Args:
        ctx: Click context (unused).
        param: Click parameter (unused).
        value: The raw option value(s).

    Returns:
        dict[str, int]: `DEFAULT_LIB_LEVELS` updated with the parsed items.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL, NAME is empty, or
            LEVEL is not a standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _parse_level(level_str)
    return levels
