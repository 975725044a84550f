"""Locale-sensitive currency lookups honouring Unicode extension overrides.

The currency for a language tag is chosen by the first rule that applies:

1. the ``cu`` keyword names it explicitly (``de-CH-u-cu-usd`` -> USD);
2. the ``rg`` keyword overrides the region (``en-US-u-rg-gbzzzz`` -> GBP);
3. the tag's own region subtag (``de-CH`` -> CHF).

For rules 2 and 3 the legal tender of the region on the reference date is
used. The currency's symbol and display name are localized for the tag's
language and region, so ``de-CH-u-cu-usd`` yields US dollars as shown to a
Swiss German reader.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from babel.numbers import (
    format_currency,
    get_currency_name,
    get_currency_precision,
    get_currency_symbol,
    get_territory_currencies,
    is_currency,
)

from calque.config import get_reference_date

from .cldr import resolve_locale
from .errors import CurrencyLookupError
from .language_tag import LanguageTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Currency:
    """An ISO 4217 currency as presented in a particular locale."""

    code: str
    symbol: str
    name: str
    fraction_digits: int


def _as_tag(tag: LanguageTag | str) -> LanguageTag:
    return tag if isinstance(tag, LanguageTag) else LanguageTag.parse(tag)


def currency_code_for(tag: LanguageTag | str, on: date | None = None) -> str:
    """Return the ISO 4217 code of the currency selected by *tag*.

    Args:
        tag: A `LanguageTag` or its string form.
        on: Date for which the region's legal tender is looked up. Defaults
            to `calque.config.get_reference_date()`.

    Raises:
        LanguageTagError: If *tag* is a malformed string or has a malformed
            ``rg`` value.
        CurrencyLookupError: If the ``cu`` value is not a known currency, or
            the tag names no region, or the region has no tender currency.
    """
    tag = _as_tag(tag)
    if (code := tag.unicode_keyword("cu")) is not None:
        code = code.upper()
        if not is_currency(code):
            raise CurrencyLookupError(str(tag), f"unknown currency {code!r}")
        logger.debug("Currency %s for %s from cu keyword", code, tag)
        return code

    region = tag.effective_region
    if region is None:
        raise CurrencyLookupError(str(tag), "tag has no region")
    on = on or get_reference_date()
    currencies = get_territory_currencies(region, start_date=on, tender=True)
    if not currencies:
        raise CurrencyLookupError(
            str(tag), f"no tender currency for region {region} on {on}"
        )
    logger.debug(
        "Currency %s for %s from region %s on %s", currencies[0], tag, region, on
    )
    return currencies[0]


def currency_for(tag: LanguageTag | str, on: date | None = None) -> Currency:
    """Return the currency selected by *tag*, localized for the tag's locale.

    Example:
        >>> currency_for("de-CH").symbol
        'CHF'

    Raises:
        LanguageTagError: See `currency_code_for`.
        CurrencyLookupError: See `currency_code_for`.
        UnsupportedLocaleError: If CLDR has no data for the tag's language.
    """
    tag = _as_tag(tag)
    code = currency_code_for(tag, on)
    locale = resolve_locale(tag)
    return Currency(
        code=code,
        symbol=get_currency_symbol(code, locale=locale),
        name=get_currency_name(code, locale=locale),
        fraction_digits=get_currency_precision(code),
    )


def format_amount(
    amount: Decimal | int | float | str,
    tag: LanguageTag | str,
    on: date | None = None,
) -> str:
    """Format *amount* in the currency selected by *tag*, using the tag's locale.

    Raises:
        LanguageTagError: See `currency_code_for`.
        CurrencyLookupError: See `currency_code_for`.
        UnsupportedLocaleError: If CLDR has no data for the tag's language.
    """
    tag = _as_tag(tag)
    code = currency_code_for(tag, on)
    return format_currency(Decimal(str(amount)), code, locale=resolve_locale(tag))
