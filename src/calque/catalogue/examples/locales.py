"""Examples: Unicode language-tag extensions.

A BCP 47 language tag such as ``de-CH`` names a language and a region. The
Unicode ``u`` extension appends keywords that override one category of
locale data for that tag:

- ``cu`` overrides the currency (``de-CH-u-cu-usd``);
- ``rg`` overrides the region used for regional preferences
  (``en-US-u-rg-gbzzzz``);
- ``fw`` overrides the first day of the week (``en-US-u-fw-mon``).

Currency lookups use the configured reference date rather than today, so
the outcome does not depend on when the example runs.
"""

from calque.config import DEFAULT_REFERENCE_DATE
from calque.locales import (
    LanguageTag,
    currency_code_for,
    currency_for,
    first_day_of_week,
)

from ..checks import check_equal, check_true
from ..registry import example

GROUP = "locales"

MONDAY, SUNDAY = 0, 6


@example(group=GROUP)
def override_default_currency_with_unicode_extension() -> None:
    """The cu keyword overrides the region's default currency."""
    swiss = currency_for("de-CH", on=DEFAULT_REFERENCE_DATE)
    check_equal(swiss.code, "CHF", "currency code")
    check_equal(swiss.symbol, "CHF", "currency symbol")

    # US dollars, as presented to a Swiss German reader
    dollars = currency_for("de-CH-u-cu-usd", on=DEFAULT_REFERENCE_DATE)
    check_equal(dollars.code, "USD", "currency code")
    check_true("$" in dollars.symbol, f"{dollars.symbol!r} to contain '$'")


@example(group=GROUP)
def region_override_changes_currency() -> None:
    """The rg keyword selects another region's currency, unless cu is also set."""
    check_equal(currency_code_for("en-US", on=DEFAULT_REFERENCE_DATE), "USD")
    check_equal(
        currency_code_for("en-US-u-rg-gbzzzz", on=DEFAULT_REFERENCE_DATE), "GBP"
    )
    check_equal(
        currency_code_for("en-US-u-cu-eur-rg-gbzzzz", on=DEFAULT_REFERENCE_DATE), "EUR"
    )


@example(group=GROUP)
def first_day_of_week_override() -> None:
    """The fw keyword overrides the region's first day of the week."""
    check_equal(first_day_of_week("en-US"), SUNDAY, "first day of week")
    check_equal(first_day_of_week("en-US-u-fw-mon"), MONDAY, "first day of week")


@example(group=GROUP)
def unicode_keywords_are_canonicalised() -> None:
    """Tags are normalised: case per subtag kind, keywords sorted by key."""
    tag = LanguageTag.parse("DE-ch-U-RG-GBZZZZ-CU-USD")

    check_equal(tag.to_language_tag(), "de-CH-u-cu-usd-rg-gbzzzz")
    check_equal(dict(tag.unicode_keywords), {"cu": "usd", "rg": "gbzzzz"})
    check_equal(tag.region_override, "GB", "region override")
