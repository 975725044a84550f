"""``calque locale`` — resolve CLDR locale data for BCP 47 language tags.

Every command takes an optional TAG argument, defaulting to
``CALQUE_LANGUAGE_TAG`` (``en-US`` when unset). Results go to **stdout** as
``key: value`` lines; invalid tags and failed lookups are reported on
**stderr** with exit status 1.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal, InvalidOperation
from functools import wraps
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from calque.config import ConfigError, get_default_language_tag
from calque.locales import (
    LanguageTag,
    LocaleError,
    currency_for,
    first_day_of_week,
    format_amount,
    weekday_name,
)

from .helpers import error

if TYPE_CHECKING:
    from datetime import date


def _reports_errors[**P](command: Callable[P, None]) -> Callable[P, None]:
    """Turn library errors raised by *command* into an error line and exit 1."""

    @wraps(command)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> None:
        try:
            command(*args, **kwargs)
        except (LocaleError, ConfigError) as e:
            error(str(e))
            raise click.exceptions.Exit(1) from e

    return wrapper


def _resolve_tag(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | None,
) -> str:
    return value or get_default_language_tag()


def _parse_amount(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | None,
) -> Decimal | None:
    if value is None:
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation as e:
        raise click.BadParameter(f"{value!r} is not a decimal number") from e
    if not amount.is_finite():
        raise click.BadParameter(f"{value!r} is not a finite number")
    return amount


tag_argument = click.argument("tag", required=False, callback=_resolve_tag)


def _echo_fields(fields: dict[str, object]) -> None:
    width = max(len(key) for key in fields)
    for key, value in fields.items():
        click.echo(f"{key + ':':<{width + 1}} {value}")


@click.group(cls=clickx.ExtraGroup)
def locale() -> None:
    """Resolve locale data for BCP 47 language tags."""


@locale.command()
@tag_argument
@_reports_errors
def parse(tag: str) -> None:
    """Show the canonical form and Unicode extension keywords of TAG."""
    parsed = LanguageTag.parse(tag)
    keywords = " ".join(f"{k}={v}" for k, v in parsed.unicode_keywords.items())
    _echo_fields(
        {
            "tag": parsed.to_language_tag(),
            "locale": parsed.to_locale_identifier(),
            "region": parsed.effective_region or "-",
            "keywords": keywords or "-",
        }
    )


@locale.command()
@tag_argument
@click.option(
    "--on",
    "on",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Date for the region's legal tender (default: CALQUE_REFERENCE_DATE).",
)
@click.option(
    "--amount",
    callback=_parse_amount,
    help="Also format this amount in the resolved currency.",
)
@_reports_errors
def currency(tag: str, on: datetime | None, amount: Decimal | None) -> None:
    """Show the currency selected by TAG (honouring cu and rg keywords)."""
    day: date | None = on.date() if on is not None else None
    resolved = currency_for(tag, on=day)
    fields: dict[str, object] = {
        "tag": tag,
        "code": resolved.code,
        "symbol": resolved.symbol,
        "name": resolved.name,
        "digits": resolved.fraction_digits,
    }
    if amount is not None:
        fields["amount"] = format_amount(amount, tag, on=day)
    _echo_fields(fields)


@locale.command("first-day")
@tag_argument
@_reports_errors
def first_day(tag: str) -> None:
    """Show the first day of the week for TAG (honouring fw and rg keywords)."""
    weekday = first_day_of_week(tag)
    click.echo(f"{weekday_name(weekday, tag)} ({weekday})")
