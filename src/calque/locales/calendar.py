"""First day of the week for a language tag.

Weekdays are numbered as in `datetime.date.weekday`: 0 is Monday, 6 is
Sunday. The ``fw`` keyword wins; otherwise the ``rg`` region override, then
the tag's own region, selects the regional convention.
"""

from __future__ import annotations

import logging

from .cldr import resolve_locale, resolve_region_locale
from .errors import LanguageTagError
from .language_tag import LanguageTag

logger = logging.getLogger(__name__)

WEEKDAY_KEYWORDS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


def first_day_of_week(tag: LanguageTag | str) -> int:
    """Return the first day of the week for *tag* (0 = Monday).

    Example:
        >>> first_day_of_week("en-US"), first_day_of_week("en-US-u-fw-mon")
        (6, 0)

    Raises:
        LanguageTagError: If the tag, its ``fw`` value or its ``rg`` value is
            malformed.
        UnsupportedLocaleError: If CLDR has no data for the tag.
    """
    if not isinstance(tag, LanguageTag):
        tag = LanguageTag.parse(tag)

    if (keyword := tag.unicode_keyword("fw")) is not None:
        if keyword not in WEEKDAY_KEYWORDS:
            raise LanguageTagError(str(tag), f"invalid fw value {keyword!r}")
        return WEEKDAY_KEYWORDS.index(keyword)

    if (region := tag.effective_region) is not None:
        locale = resolve_region_locale(tag, region)
    else:
        locale = resolve_locale(tag)
    logger.debug("First day of week for %s from CLDR locale %s", tag, locale)
    return locale.first_week_day


def weekday_name(weekday: int, tag: LanguageTag | str) -> str:
    """Return the wide, localized name of *weekday* (0 = Monday) for *tag*.

    Raises:
        ValueError: If weekday is not in 0..6.
    """
    if not 0 <= weekday <= 6:
        raise ValueError(f"weekday must be in 0..6, got {weekday}")
    if not isinstance(tag, LanguageTag):
        tag = LanguageTag.parse(tag)
    return resolve_locale(tag).days["format"]["wide"][weekday]
