"""Bridge between `LanguageTag` and Babel's CLDR locale data."""

from __future__ import annotations

import logging

from babel import Locale, UnknownLocaleError

from .errors import UnsupportedLocaleError
from .language_tag import LanguageTag

logger = logging.getLogger(__name__)


def _candidates(tag: LanguageTag) -> list[str]:
    """Locale identifiers to try for *tag*, most specific first."""
    candidates = [tag.to_locale_identifier()]
    if tag.script and tag.region:
        candidates.append(f"{tag.language}_{tag.script}_{tag.region}")
    if tag.region:
        candidates.append(f"{tag.language}_{tag.region}")
    if tag.script:
        candidates.append(f"{tag.language}_{tag.script}")
    candidates.append(tag.language)
    return list(dict.fromkeys(candidates))


def resolve_locale(tag: LanguageTag) -> Locale:
    """Return the most specific Babel locale available for *tag*.

    Extensions are ignored. Variants, then region and script, are dropped
    until CLDR has data for the remaining identifier.

    Raises:
        UnsupportedLocaleError: If CLDR has no data even for the bare language.
    """
    for identifier in _candidates(tag):
        try:
            locale = Locale.parse(identifier)
        except (UnknownLocaleError, ValueError):
            logger.debug("No CLDR data for %s", identifier)
            continue
        if identifier != tag.to_locale_identifier():
            logger.debug("Using CLDR locale %s for %s", locale, tag)
        return locale
    raise UnsupportedLocaleError(tag.to_language_tag())


def resolve_region_locale(tag: LanguageTag, region: str) -> Locale:
    """Return a Babel locale carrying the regional data of *region*.

    Prefers the tag's own language in that region (``en`` + ``GB`` ->
    ``en_GB``) and otherwise falls back to the region's most likely language
    (``und_GB``).

    Raises:
        UnsupportedLocaleError: If CLDR has no data for the region.
    """
    for identifier in (f"{tag.language}_{region}", f"und_{region}"):
        try:
            return Locale.parse(identifier)
        except (UnknownLocaleError, ValueError):
            logger.debug("No CLDR data for %s", identifier)
    raise UnsupportedLocaleError(f"{tag.language}-{region}")
